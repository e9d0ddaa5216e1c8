"""String helpers for archive names, command lines and messages."""

import enum
import locale
import os

_WINDOWS = os.name == "nt"


class ArcEncoding(enum.Enum):
    """Encoding of names and comments stored in an archive."""

    DEFAULT = 0
    OEM = 1
    UTF8 = 2


def _code(ch):
    if isinstance(ch, str):
        return ord(ch) if len(ch) == 1 else -1
    return ch


def arc_char_to_wide(src, encoding=ArcEncoding.DEFAULT):
    """Decode a NUL terminated archived name or comment to text."""
    raw = bytes(src).split(b"\0", 1)[0]
    if all(b <= 127 for b in raw):
        return raw.decode("ascii")
    if encoding is ArcEncoding.UTF8:
        text = raw.decode("utf-8", "replace")
    else:
        text = raw.decode(locale.getpreferredencoding(False), "replace")
    return truncate_at_zero(text)


def _compare_upper(s1, s2, n=None):
    i = 0
    while True:
        c1 = etoupperw(s1[i]) if i < len(s1) else "\0"
        c2 = etoupperw(s2[i]) if i < len(s2) else "\0"
        if c1 != c2:
            return -1 if c1 < c2 else 1
        i += 1
        if c1 == "\0" or (n is not None and i >= n):
            return 0


def stricomp(s1, s2):
    """Compare ignoring the case of English letters; return -1, 0 or 1."""
    return _compare_upper(s1, s2)


def strnicomp(s1, s2, n):
    """Like :func:`stricomp`, but compare at most ``n`` characters."""
    if n == 0:
        return 0
    return _compare_upper(s1, s2, n)


def remove_eol(s):
    """Strip trailing CR, LF, spaces and tabs."""
    return s.rstrip("\r\n \t")


def remove_lf(s):
    """Strip trailing CR and LF."""
    return s.rstrip("\r\n")


def etoupperw(c):
    """Upper case for English letters only; other characters are kept."""
    return chr(ord(c) - 32) if "a" <= c <= "z" else c


def is_digit(ch):
    code = _code(ch)
    return ord("0") <= code <= ord("9")


def is_space(ch):
    return _code(ch) in (ord(" "), ord("\t"))


def is_alpha(ch):
    code = _code(ch)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def bin_to_hex(data):
    """Lower case hexadecimal text of ``data``."""
    return bytes(data).hex()


def get_digits(number):
    """Number of decimal digits of a non-negative integer."""
    digits = 1
    while number >= 10:
        number //= 10
        digits += 1
    return digits


def low_ascii(s):
    """True if every character or byte of ``s`` is below 128."""
    if isinstance(s, (bytes, bytearray)):
        return all(b <= 127 for b in s)
    return all(ord(c) <= 127 for c in s)


def _cmp(a, b):
    return (a > b) - (a < b)


def wcsicompc(s1, s2):
    """Compare paths: case-insensitive on Windows, exact elsewhere."""
    if _WINDOWS:
        return _cmp(s1.lower(), s2.lower())
    return _cmp(s1, s2)


def wcsnicompc(s1, s2, n):
    """Compare at most ``n`` characters of two paths, as :func:`wcsicompc`."""
    return wcsicompc(s1[:n], s2[:n])


def itoa(n, max_size=50):
    """Decimal text of ``n`` fitting a buffer of ``max_size`` with terminator.

    When the buffer is too small the most significant digits are dropped.
    """
    neg = n < 0
    limit = max(0, max_size - int(neg) - 1)
    digits = str(abs(n))
    kept = digits[-limit:] if limit else ""
    return ("-" if neg else "") + kept


def fmtitoa(n, max_size=50, separator=None):
    """Decimal text of ``n`` with thousands separators."""
    if separator is None:
        separator = locale.localeconv().get("thousands_sep") or " "
    raw = itoa(n, 30)
    lead = len(raw) % 3
    out = []
    length = 0
    for index, ch in enumerate(raw):
        if length + 1 >= max_size:
            break
        if index != 0 and (index + 3 - lead) % 3 == 0:
            out.append(separator)
            length += 1
        out.append(ch)
        length += 1
    return "".join(out)


def get_cmd_param(cmdline, pos=0):
    """Parse one space separated, optionally quoted parameter.

    Returns ``(param, next_pos)``, or None if nothing is left to parse.
    Two adjoining quote characters stand for one literal quote.
    """
    size = len(cmdline)
    while pos < size and is_space(cmdline[pos]):
        pos += 1
    if pos >= size:
        return None
    quote = False
    param = []
    while pos < size and (quote or not is_space(cmdline[pos])):
        ch = cmdline[pos]
        if ch == '"':
            if pos + 1 < size and cmdline[pos + 1] == '"':
                param.append('"')
                pos += 1
            else:
                quote = not quote
        else:
            param.append(ch)
        pos += 1
    return "".join(param), pos


def printf_prepare_fmt(fmt):
    """Turn ``%s`` specifiers into ``%ls``, keeping widths and ``%%``."""
    out = []
    src = 0
    size = len(fmt)
    while src < size:
        if fmt[src] == "%" and (src == 0 or fmt[src - 1] != "%"):
            spos = src + 1
            while spos < size and (is_digit(fmt[spos]) or fmt[spos] in "-."):
                spos += 1
            if spos < size and fmt[spos] == "s":
                out.append(fmt[src:spos])
                out.append("l")
                src = spos
        if _WINDOWS and fmt[src] == "\n" and (src == 0 or fmt[src - 1] != "\r"):
            out.append("\r")
        out.append(fmt[src])
        src += 1
    return "".join(out)


def truncate_at_zero(s):
    """Cut ``s`` at its first NUL character."""
    return s.split("\0", 1)[0]


def replace_esc(s):
    """Make escape characters visible as the text '\\033'."""
    return s.replace("\x1b", "'\\033'")


def to_percent_unlim(n1, n2):
    """``n1`` as a percentage of ``n2``, allowed above 100; 0 if ``n2`` is 0."""
    if n2 == 0:
        return 0
    value = abs(n1 * 100) // abs(n2)
    return -value if (n1 < 0) != (n2 < 0) else value


def to_percent(n1, n2):
    """``n1`` as a percentage of ``n2``, capped at 100."""
    if n2 < n1:
        return 100
    return to_percent_unlim(n1, n2)
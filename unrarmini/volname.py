"""Volume name sequencing and file name sanitising."""

import os

from .pathfn import (
    cmp_ext,
    get_ext_pos,
    get_name_pos,
    is_drive_letter,
    is_path_div,
    set_ext,
)
from .strfn import etoupperw, is_digit

_WINDOWS = os.name == "nt"

_RESERVED_DEVICES = ("CON", "PRN", "AUX", "NUL", "COM#", "LPT#")


def _at(s, i):
    """Character at ``i``, or an empty string past either end."""
    return s[i] if 0 <= i < len(s) else ""


def get_vol_num_pos(arc_name):
    """Index of the rightmost digit of the volume number.

    Points into the name part only; if there is no numeric part the index
    of the name's first character is returned.
    """
    name_pos = get_name_pos(arc_name)
    if name_pos == len(arc_name):
        return name_pos

    pos = len(arc_name) - 1
    while not is_digit(arc_name[pos]) and pos > name_pos:
        pos -= 1

    num_pos = pos
    while is_digit(arc_name[num_pos]) and num_pos > name_pos:
        num_pos -= 1

    # For names like name.part##of##.rar prefer the first numeric part,
    # as long as a dot precedes it.
    while num_pos > name_pos and arc_name[num_pos] != ".":
        if is_digit(arc_name[num_pos]):
            dot = arc_name.find(".", name_pos)
            if dot != -1 and dot < num_pos:
                pos = num_pos
            break
        num_pos -= 1
    return pos


def _next_new_style(name):
    chars = list(name)
    num_pos = get_vol_num_pos(name)
    # Non-digits are incremented too, so a corrupt name still changes.
    while True:
        chars[num_pos] = chr(ord(chars[num_pos]) + 1)
        if chars[num_pos] != ":":
            break
        chars[num_pos] = "0"
        if num_pos == 0:
            break
        num_pos -= 1
        if not is_digit(chars[num_pos]):
            chars.insert(num_pos + 1, "1")
            break
    return "".join(chars)


def _next_old_style(name, dot):
    if len(name) - dot < 3:
        name = name[:dot + 1] + "rar"
    if not is_digit(_at(name, dot + 2)) or not is_digit(_at(name, dot + 3)):
        return name[:dot + 2] + "00"
    chars = list(name)
    num_pos = len(chars) - 1
    while True:
        chars[num_pos] = chr(ord(chars[num_pos]) + 1)
        if chars[num_pos] != ":":
            break
        if num_pos == 0 or chars[num_pos - 1] == ".":
            chars[num_pos] = "a"
            break
        chars[num_pos] = "0"
        num_pos -= 1
    return "".join(chars)


def next_volume_name(arc_name, old_numbering=False):
    """Name of the volume that follows ``arc_name``.

    New numbering increments the number in 'name.partN.rar'; old numbering
    walks the extension through .rar, .r00, .r01 and so on.
    """
    name = arc_name
    dot = get_ext_pos(name)
    if dot is None:
        name += ".rar"
        dot = get_ext_pos(name)
    elif dot + 1 == len(name) or cmp_ext(name, "exe") or cmp_ext(name, "sfx"):
        name = set_ext(name, "rar")

    if old_numbering:
        return _next_old_style(name, dot)
    return _next_new_style(name)


def is_name_usable(name):
    """True if ``name`` can be created on a Windows file system or share."""
    if _WINDOWS:
        if name.find(":", 2) != -1:
            return False
    elif ":" in name:
        return False
    for i, ch in enumerate(name):
        if ord(ch) < 32:
            return False
        if not _WINDOWS and ch in " ." and is_path_div(_at(name, i + 1)):
            return False
    return bool(name) and not any(ch in '?*<>|"' for ch in name)


def make_name_usable(name, extended):
    """Replace characters that cannot appear in file names with '_'.

    Without ``extended`` only wildcards are replaced; with it also the
    characters '<>|"', control characters and, on Unix-like systems, colons
    and spaces or dots before a path separator.
    """
    start = 0
    if (_WINDOWS and len(name) > 5 and name.startswith("\\\\?\\")
            and is_drive_letter(name[4:])):
        start = 6

    forbidden = '?*<>|"' if extended else "?*"
    chars = list(name)
    for i in range(start, len(chars)):
        ch = chars[i]
        if ch == "\0" or ch in forbidden or (extended and ord(ch) < 32):
            chars[i] = "_"
        if _WINDOWS:
            if i > 1 and chars[i] == ":":
                chars[i] = "_"
            continue
        if not extended:
            continue
        if chars[i] == ":":
            chars[i] = "_"
        nxt = chars[i + 1] if i + 1 < len(chars) else ""
        if is_path_div(nxt):
            ch = chars[i]
            prev = chars[i - 1] if i > 0 else ""
            prev2 = chars[i - 2] if i > 1 else ""
            if ch == " " or (
                ch == "." and i > 0 and not is_path_div(prev)
                and (prev != "." or (i > 1 and not is_path_div(prev2)))
            ):
                chars[i] = "_"
    return "".join(chars)


def _matches_device(name, start):
    for device in _RESERVED_DEVICES:
        k = 0
        while True:
            ch = _at(name, start + k)
            if k == len(device):
                if ch == "" or is_path_div(ch):
                    return True
                break
            if device[k] == "#":
                if not is_digit(ch):
                    break
            elif ch == "" or device[k] != etoupperw(ch):
                break
            k += 1
    return False


def make_name_compatible(name):
    """Adapt a name to Windows rules.

    Trailing dots and spaces of every path component become '_', except in
    '.' and '..' components, and reserved device names such as 'aux' get
    a leading '_'.
    """
    drive = is_drive_letter(name)
    chars = list(name)
    size = len(chars)
    for i in range(size):
        if not (i + 1 == size or is_path_div(chars[i + 1])):
            continue
        if chars[i] not in ". ":
            continue
        if chars[i] == ".":
            if i == 0 or is_path_div(chars[i - 1]) or (i == 2 and drive):
                continue
            if i >= 1 and chars[i - 1] == "." and (
                    i == 1 or is_path_div(chars[i - 2]) or (i == 3 and drive)):
                continue
        chars[i] = "_"
    result = "".join(chars)

    i = 0
    while i < len(result):
        if (i == 0 or is_path_div(result[i - 1])) and _matches_device(result, i):
            result = result[:i] + "_" + result[i:]
        i += 1
    return result


def parse_version_file_name(name):
    """Split a 'name;N' version suffix off ``name``.

    Returns ``(version, base_name)``; the version is 0 and the name is kept
    whole when there is no suffix.
    """
    pos = name.rfind(";")
    if pos == -1 or pos + 1 >= len(name):
        return 0, name
    text = name[pos + 1:].lstrip(" \t")
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for ch in text:
        if not is_digit(ch):
            break
        digits += ch
    version = sign * int(digits) if digits else 0
    return version, name[:pos]
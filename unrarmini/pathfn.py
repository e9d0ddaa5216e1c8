"""Path name helpers: name and extension parts, separators, drive letters."""

import os

from .strfn import etoupperw

_WINDOWS = os.name == "nt"


def _divider():
    return "\\" if _WINDOWS else "/"


def _at(s, i):
    """Character at ``i``, or an empty string past either end."""
    return s[i] if 0 <= i < len(s) else ""


def is_path_div(ch):
    """True if ``ch`` separates path components on this platform."""
    if _WINDOWS:
        return ch in ("\\", "/")
    return ch == "/"


def is_drive_div(ch):
    """True if ``ch`` follows a drive letter; never on Unix-like systems."""
    if not _WINDOWS:
        return False
    return ch == ":"


def is_drive_letter(path):
    """True if ``path`` starts with a drive letter and its colon."""
    if len(path) < 2:
        return False
    letter = etoupperw(path[0])
    return "A" <= letter <= "Z" and is_drive_div(path[1])


def get_name_pos(path):
    """Index where the file name part of ``path`` starts."""
    for i in range(len(path) - 1, -1, -1):
        if is_path_div(path[i]):
            return i + 1
    return 2 if is_drive_letter(path) else 0


def point_to_name(path):
    """The file name part of ``path``."""
    return path[get_name_pos(path):]


def get_last_char(path):
    """Last character of ``path``, or an empty string if it is empty."""
    return path[-1] if path else ""


def convert_path(path):
    """Strip leading drive, UNC server/share, '.' and '..' parts, and
    everything up to the last '..' component.

    The result is always a suffix of ``path``.
    """
    s = path
    size = len(s)
    dest = 0

    for i in range(size):
        if (is_path_div(s[i]) and _at(s, i + 1) == "." and _at(s, i + 2) == "."
                and (is_path_div(_at(s, i + 3)) or _at(s, i + 3) == "")):
            dest = i + 3 if _at(s, i + 3) == "" else i + 4

    while dest < size:
        i = dest
        if i + 1 < size and is_drive_div(s[i + 1]):
            i += 2

        if is_path_div(_at(s, i)) and is_path_div(_at(s, i + 1)):
            slashes = 0
            for j in range(i + 2, size):
                if is_path_div(s[j]):
                    slashes += 1
                    if slashes == 2:
                        i = j + 1
                        break

        for j in range(i, size):
            if is_path_div(s[j]):
                i = j + 1
            elif s[j] != ".":
                break
        if i == dest:
            break
        dest = i

    return s[dest:]


def set_name(full_name, name):
    """Replace the file name part of ``full_name`` with ``name``."""
    return full_name[:get_name_pos(full_name)] + name


def get_ext_pos(name):
    """Index of the extension's leading dot, or None if there is none."""
    name_pos = get_name_pos(name)
    dot = name.rfind(".")
    if dot < name_pos:
        return None
    return dot


def set_ext(name, ext):
    """Replace or add the extension; ``ext`` has no leading dot."""
    pos = get_ext_pos(name)
    if pos is not None:
        name = name[:pos]
    return name + "." + ext


def remove_ext(name):
    """Remove the extension together with its dot."""
    pos = get_ext_pos(name)
    return name if pos is None else name[:pos]


def get_ext(name):
    """The extension with its leading dot, or an empty string."""
    pos = get_ext_pos(name)
    return "" if pos is None else name[pos:]


def cmp_ext(name, ext):
    """Case-insensitive check of the extension; ``ext`` has no leading dot."""
    pos = get_ext_pos(name)
    if pos is None:
        return ext == ""
    return name[pos + 1:].lower() == ext.lower()


def is_wildcard(s):
    """True if ``s`` holds '*' or '?', ignoring a Windows '\\\\?\\' prefix."""
    start = 4 if _WINDOWS and s.startswith("\\\\?\\") else 0
    return any(ch in "*?" for ch in s[start:])


def get_path_disk(path):
    """Zero based drive number of ``path``, or -1 without a drive letter."""
    if is_drive_letter(path):
        return ord(etoupperw(path[0])) - ord("A")
    return -1


def add_end_slash(path):
    """Append the native separator unless ``path`` is empty or ends in it."""
    div = _divider()
    if path and path[-1] != div:
        return path + div
    return path


def make_name(path, name):
    """Join ``path`` and ``name``; a bare 'd:' gets no separator."""
    out = path
    if not is_drive_letter(path) or len(path) > 2:
        out = add_end_slash(out)
    return out + name


def get_path_with_sep(full_name):
    """The directory part of ``full_name`` with its trailing separator."""
    return full_name[:get_name_pos(full_name)]


def remove_name_from_path(path):
    """The directory part without trailing separator; 'd:\\' keeps its one."""
    pos = get_name_pos(path)
    if pos >= 2 and (not is_drive_div(path[1]) or pos >= 4):
        pos -= 1
    return path[:pos]


def is_full_path(path):
    """True for absolute paths."""
    if _WINDOWS:
        return ((len(path) >= 2 and path[0] == "\\" and path[1] == "\\")
                or (len(path) >= 3 and is_drive_letter(path)
                    and is_path_div(path[2])))
    return len(path) >= 1 and is_path_div(path[0])


def is_full_root_path(path):
    """True for absolute paths and paths starting at the current root."""
    return is_full_path(path) or is_path_div(_at(path, 0))


def get_path_root(path):
    """Root of ``path``: 'd:\\', '\\\\server\\share\\' or an empty string."""
    if is_drive_letter(path):
        return path[:2] + "\\"
    if _at(path, 0) == "\\" and _at(path, 1) == "\\":
        slash = path.find("\\", 2)
        if slash == -1:
            return path
        slash = path.find("\\", slash + 1)
        length = slash + 1 if slash != -1 else len(path)
        return path[:length]
    return ""


def unix_slash_to_dos(name):
    """Replace forward slashes with backslashes."""
    return name.replace("/", "\\")


def dos_slash_to_unix(name):
    """Replace backslashes with forward slashes."""
    return name.replace("\\", "/")


def slash_to_native(name):
    """Convert separators to the ones of this platform."""
    if _WINDOWS:
        return unix_slash_to_dos(name)
    return dos_slash_to_unix(name)
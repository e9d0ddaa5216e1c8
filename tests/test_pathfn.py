import string

import pytest

from unrarmini import pathfn


@pytest.fixture
def windows(monkeypatch):
    monkeypatch.setattr(pathfn, "_WINDOWS", True)


@pytest.fixture
def posix(monkeypatch):
    monkeypatch.setattr(pathfn, "_WINDOWS", False)


def test_path_div_posix(posix):
    assert pathfn.is_path_div("/")
    assert not pathfn.is_path_div("\\")
    assert not pathfn.is_drive_div(":")


def test_path_div_windows(windows):
    assert pathfn.is_path_div("/")
    assert pathfn.is_path_div("\\")
    assert pathfn.is_drive_div(":")


@pytest.mark.parametrize(
    "path", ["dir/sub/file.rar", "file", "/abs/x.txt", "dir/", ""]
)
def test_name_split_round_trip(posix, path):
    assert pathfn.get_path_with_sep(path) + pathfn.point_to_name(path) == path
    assert pathfn.set_name(path, pathfn.point_to_name(path)) == path


def test_point_to_name(posix):
    assert pathfn.point_to_name("dir/sub/file.rar") == "file.rar"
    assert pathfn.get_name_pos("dir/sub/file.rar") == len("dir/sub/")


def test_point_to_name_drive(windows):
    assert pathfn.point_to_name("c:file.rar") == "file.rar"
    assert pathfn.point_to_name("c:\\d\\file.rar") == "file.rar"


def test_drive_numbers(windows):
    upper = [pathfn.get_path_disk(c + ":") for c in string.ascii_uppercase]
    lower = [pathfn.get_path_disk(c + ":") for c in string.ascii_lowercase]
    assert upper == list(range(26))
    assert lower == upper
    assert pathfn.get_path_disk("1:") == -1


def test_drive_letter_posix(posix):
    assert not pathfn.is_drive_letter("c:\\x")
    assert pathfn.get_path_disk("c:") == -1


def test_get_last_char():
    assert pathfn.get_last_char("abc") == "c"
    assert pathfn.get_last_char("") == ""


def test_extensions(posix):
    assert pathfn.get_ext("arc.rar") == ".rar"
    assert pathfn.get_ext("dir.x/name") == ""
    assert pathfn.get_ext_pos("dir.x/name") is None
    assert pathfn.set_ext("a.txt", "rar") == "a.rar"
    assert pathfn.set_ext("a", "rar") == "a.rar"
    assert pathfn.remove_ext("a.b.c") == "a.b"
    assert pathfn.remove_ext("a.") == "a"
    assert pathfn.remove_ext("dir.x/name") == "dir.x/name"


@pytest.mark.parametrize("ext", ["rar", "exe", "sfx"])
def test_set_ext_round_trip(posix, ext):
    name = pathfn.set_ext("dir/arc.part1.old", ext)
    assert pathfn.get_ext(name) == "." + ext
    assert pathfn.cmp_ext(name, ext.upper())
    assert pathfn.remove_ext(name) == "dir/arc.part1"


def test_cmp_ext(posix):
    assert pathfn.cmp_ext("ARC.RAR", "rar")
    assert not pathfn.cmp_ext("arc.rar", "exe")
    assert pathfn.cmp_ext("noext", "")
    assert not pathfn.cmp_ext("noext", "rar")


def test_is_wildcard(windows):
    assert pathfn.is_wildcard("*.rar")
    assert pathfn.is_wildcard("a?c")
    assert not pathfn.is_wildcard("plain.rar")
    assert not pathfn.is_wildcard("\\\\?\\c:\\dir")


def test_is_wildcard_posix_prefix(posix):
    assert pathfn.is_wildcard("\\\\?\\c:\\dir")


def test_add_end_slash(posix):
    assert pathfn.add_end_slash("a") == "a/"
    assert pathfn.add_end_slash("a/") == "a/"
    assert pathfn.add_end_slash("") == ""


def test_make_name(windows):
    assert pathfn.make_name("c:", "f") == "c:f"
    assert pathfn.make_name("c:\\d", "f") == "c:\\d\\f"
    assert pathfn.make_name("c:\\d\\", "f") == "c:\\d\\f"


def test_make_name_posix(posix):
    assert pathfn.make_name("dir", "f") == "dir/f"
    assert pathfn.make_name("", "f") == "f"


def test_remove_name_from_path_posix(posix):
    assert pathfn.remove_name_from_path("a/b/c") == "a/b"
    assert pathfn.remove_name_from_path("/c") == "/"
    assert pathfn.remove_name_from_path("c") == ""


def test_remove_name_from_path_windows(windows):
    assert pathfn.remove_name_from_path("c:\\name") == "c:\\"
    assert pathfn.remove_name_from_path("c:\\d\\n") == "c:\\d"


def test_full_path_posix(posix):
    assert pathfn.is_full_path("/etc")
    assert not pathfn.is_full_path("etc")
    assert not pathfn.is_full_path("")
    assert pathfn.is_full_root_path("/etc")


def test_full_path_windows(windows):
    assert pathfn.is_full_path("c:\\x")
    assert pathfn.is_full_path("\\\\server\\share")
    assert not pathfn.is_full_path("c:x")
    assert not pathfn.is_full_path("\\x")
    assert pathfn.is_full_root_path("\\x")
    assert not pathfn.is_full_root_path("x")


def test_get_path_root(windows):
    assert pathfn.get_path_root("c:\\x\\y") == "c:\\"
    assert pathfn.get_path_root("\\\\server\\share\\dir") == "\\\\server\\share\\"
    assert pathfn.get_path_root("\\\\server\\share") == "\\\\server\\share"
    assert pathfn.get_path_root("rel\\path") == ""


@pytest.mark.parametrize(
    "src, expected",
    [
        ("../../etc/hosts", "etc/hosts"),
        ("a/../b", "b"),
        ("/abs/x", "abs/x"),
        ("./x", "x"),
        ("a/b/..", ""),
        ("//server/share/f", "f"),
        ("plain/name", "plain/name"),
    ],
)
def test_convert_path_posix(posix, src, expected):
    assert pathfn.convert_path(src) == expected


@pytest.mark.parametrize(
    "src, expected",
    [
        ("c:\\x\\y", "x\\y"),
        ("\\\\srv\\share\\f", "f"),
        ("c:..\\..\\f", "f"),
        ("d:/a/../b", "b"),
    ],
)
def test_convert_path_windows(windows, src, expected):
    assert pathfn.convert_path(src) == expected


@pytest.mark.parametrize("name", ["a/b/c", "x", "", "/root/dir/"])
def test_slash_round_trip(name):
    dos = pathfn.unix_slash_to_dos(name)
    assert "/" not in dos
    assert pathfn.dos_slash_to_unix(dos) == name


def test_slash_to_native(posix, monkeypatch):
    assert pathfn.slash_to_native("a\\b") == "a/b"
    monkeypatch.setattr(pathfn, "_WINDOWS", True)
    assert pathfn.slash_to_native("a/b") == "a\\b"
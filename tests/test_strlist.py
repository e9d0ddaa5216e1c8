import pytest

from unrarmini.strlist import StringList


@pytest.fixture
def names():
    sl = StringList()
    for s in ["alpha", "Beta", "gamma"]:
        sl.add_string(s)
    return sl


def test_sequential_reading(names):
    assert names.get_string() == "alpha"
    assert names.get_string() == "Beta"
    assert names.get_string() == "gamma"
    assert names.get_string() is None


def test_rewind(names):
    names.get_string()
    names.get_string()
    names.rewind()
    assert names.get_string() == "alpha"


def test_len_and_iter(names):
    assert len(names) == 3
    assert list(names) == ["alpha", "Beta", "gamma"]


def test_get_string_at_keeps_cursor(names):
    assert names.get_string() == "alpha"
    assert names.get_string_at(2) == "gamma"
    assert names.get_string_at(3) is None
    assert names.get_string_at(-1) is None
    assert names.get_string() == "Beta"


def test_char_count(names):
    assert names.char_count() == sum(len(s) + 1 for s in names)


def test_none_and_nul(names):
    names.add_string(None)
    names.add_string("cut\0away")
    assert list(names)[-2:] == ["", "cut"]


def test_search(names):
    assert names.search("Beta", True)
    assert not names.search("beta", True)
    assert names.search("beta", False)
    assert not names.search("delta", False)


def test_search_keeps_cursor(names):
    names.get_string()
    names.search("gamma", True)
    assert names.get_string() == "Beta"


def test_save_and_restore_nested(names):
    names.save_position()
    names.get_string()
    names.save_position()
    names.get_string()
    names.restore_position()
    assert names.get_string() == "Beta"
    names.restore_position()
    assert names.get_string() == "alpha"


def test_restore_without_save_keeps_cursor(names):
    names.get_string()
    names.restore_position()
    assert names.get_string() == "Beta"


def test_reset(names):
    names.reset()
    assert len(names) == 0
    assert names.get_string() is None
    assert names.char_count() == 0
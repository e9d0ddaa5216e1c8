from unrarmini.options import (
    ExtTimeMode,
    FilterMode,
    FilterState,
    MessageType,
    OverwriteMode,
    PathExclMode,
    RarOptions,
    RecurseMode,
)


def test_defaults_match_source():
    opts = RarOptions()
    assert opts.win_size == 0x2000000
    assert opts.win_size_limit == 0x100000000
    assert opts.method == 3
    assert opts.overwrite is OverwriteMode.DEFAULT
    assert opts.msg_stream is MessageType.STDOUT
    assert opts.xmtime is ExtTimeMode.MAX
    assert opts.xctime is ExtTimeMode.NONE
    assert opts.file_size_less is None
    assert opts.file_size_more is None


def test_filter_modes_default():
    opts = RarOptions()
    assert len(opts.filter_modes) == 16
    assert all(m == FilterMode() for m in opts.filter_modes)
    assert all(m.state is FilterState.DEFAULT for m in opts.filter_modes)


def test_filter_modes_not_shared():
    a = RarOptions()
    b = RarOptions()
    a.filter_modes[0].state = FilterState.FORCE
    assert b.filter_modes[0].state is FilterState.DEFAULT


def test_reset_restores_defaults():
    opts = RarOptions()
    opts.method = 5
    opts.overwrite = OverwriteMode.ALL
    opts.recurse = RecurseMode.ALWAYS
    opts.excl_path = PathExclMode.ABS_PATH
    opts.file_size_less = 100
    opts.filter_modes[3].param1 = 7
    opts.file_mtime_before.itime = 12345
    opts.reset()
    assert opts == RarOptions()
    assert opts.filter_modes[3].param1 == 0
    assert not opts.file_mtime_before.is_set()


def test_options_accept_source_enum_values():
    opts = RarOptions()
    opts.overwrite = OverwriteMode(3)
    opts.recurse = RecurseMode(3)
    opts.excl_path = PathExclMode(3)
    opts.msg_stream = MessageType(3)
    opts.filter_modes[0].state = FilterState(3)
    assert opts.overwrite is OverwriteMode.AUTORENAME
    assert opts.recurse is RecurseMode.WILDCARDS
    assert opts.excl_path is PathExclMode.SAVE_FULL_PATH
    assert opts.msg_stream is MessageType.NULL
    assert opts.filter_modes[0].state is FilterState.DISABLE
    opts.reset()
    assert opts.overwrite is OverwriteMode(0)
    assert opts.recurse is RecurseMode(0)
    assert opts.excl_path is PathExclMode(0)
    assert opts.msg_stream is MessageType(0)
    assert opts.filter_modes[0].state is FilterState(0)


def test_times_are_independent_instances():
    opts = RarOptions()
    opts.file_mtime_after.itime = 1
    assert opts.file_ctime_after.itime == 0
    assert RarOptions().file_mtime_after.itime == 0
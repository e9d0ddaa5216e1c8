"""Switch settings that control archive processing."""

import enum
from dataclasses import dataclass, field, fields

from .timefn import RarTime

MAX_FILTER_TYPES = 16
DEFAULT_RECOVERY = 3
DEFAULT_RECVOLUMES = -10

NAMES_ORIGINALCASE = 0
NAMES_UPPERCASE = 1
NAMES_LOWERCASE = 2

SOLID_NONE = 0
SOLID_NORMAL = 1
SOLID_COUNT = 2
SOLID_FILEEXT = 4
SOLID_VOLUME_DEPENDENT = 8
SOLID_VOLUME_INDEPENDENT = 16
SOLID_RESET = 32
SOLID_BLOCK_SIZE = 64


class PathExclMode(enum.IntEnum):
    """How much of a path is kept when names are stored or extracted."""

    UNCHANGED = 0
    SKIP_WHOLE_PATH = 1
    BASE_PATH = 2
    SAVE_FULL_PATH = 3
    ABS_PATH = 4


class ExtTimeMode(enum.IntEnum):
    """Precision of stored extended times."""

    NONE = 0
    ONE_SECOND = 1
    MAX = 2


class MessageType(enum.IntEnum):
    """Where messages go."""

    STDOUT = 0
    STDERR = 1
    ERRONLY = 2
    NULL = 3


class RecurseMode(enum.IntEnum):
    """Recursion into subdirectories."""

    NONE = 0
    DISABLE = 1
    ALWAYS = 2
    WILDCARDS = 3


class OverwriteMode(enum.IntEnum):
    """What to do when a target file already exists."""

    DEFAULT = 0
    ALL = 1
    NONE = 2
    AUTORENAME = 3
    FORCE_ASK = 4


class FilterState(enum.IntEnum):
    """State of a compression filter switch."""

    DEFAULT = 0
    AUTO = 1
    FORCE = 2
    DISABLE = 3


@dataclass
class FilterMode:
    """A filter switch with its two parameters."""

    state: FilterState = FilterState.DEFAULT
    param1: int = 0
    param2: int = 0


def _filter_modes():
    return [FilterMode() for _ in range(MAX_FILTER_TYPES)]


@dataclass
class RarOptions:
    """Settings given by command line switches, with their defaults.

    Size limits ``file_size_less`` and ``file_size_more`` are None while
    not defined.
    """

    excl_file_attr: int = 0
    incl_file_attr: int = 0
    excl_dir: bool = False
    incl_dir: bool = False
    incl_attr_set: bool = False
    win_size: int = 0x2000000
    win_size_limit: int = 0x100000000
    config_disabled: bool = False
    encrypt_headers: bool = False
    skip_encrypted: bool = False
    manual_password: bool = False
    msg_stream: MessageType = MessageType.STDOUT
    overwrite: OverwriteMode = OverwriteMode.DEFAULT
    method: int = 3
    hash_type: str = "crc32"
    recovery: int = 0
    rec_vol_number: int = 0
    disable_percentage: bool = False
    disable_copyright: bool = False
    disable_done: bool = False
    disable_names: bool = False
    print_version: bool = False
    solid: int = SOLID_NONE
    solid_count: int = 0
    solid_block_size: int = 0
    clear_arc: bool = False
    add_arc_only: bool = False
    disable_comment: bool = False
    fresh_files: bool = False
    update_files: bool = False
    excl_path: PathExclMode = PathExclMode.UNCHANGED
    recurse: RecurseMode = RecurseMode.NONE
    vol_size: int = 0
    cur_vol_num: int = 0
    all_yes: bool = False
    verbose_output: bool = False
    disable_sort_solid: bool = False
    convert_names: int = NAMES_ORIGINALCASE
    process_owners: bool = False
    save_sym_links: bool = False
    save_hard_links: bool = False
    absolute_links: bool = False
    skip_sym_links: bool = False
    priority: int = 0
    sleep_time: int = 0
    use_large_pages: bool = False
    setup_complete: bool = False
    keep_broken: bool = False
    open_shared: bool = False
    delete_files: bool = False
    allow_incompat_names: bool = False
    generate_arc_name: bool = False
    generate_mask: str = ""
    def_generate_mask: str = ""
    sync_files: bool = False
    process_ea: bool = False
    save_streams: bool = False
    set_compressed_attr: bool = False
    ignore_general_attr: bool = False
    file_mtime_before: RarTime = field(default_factory=RarTime)
    file_ctime_before: RarTime = field(default_factory=RarTime)
    file_atime_before: RarTime = field(default_factory=RarTime)
    file_mtime_before_or: bool = False
    file_ctime_before_or: bool = False
    file_atime_before_or: bool = False
    file_mtime_after: RarTime = field(default_factory=RarTime)
    file_ctime_after: RarTime = field(default_factory=RarTime)
    file_atime_after: RarTime = field(default_factory=RarTime)
    file_mtime_after_or: bool = False
    file_ctime_after_or: bool = False
    file_atime_after_or: bool = False
    file_size_less: int | None = None
    file_size_more: int | None = None
    lock: bool = False
    test: bool = False
    volume_pause: bool = False
    filter_modes: list = field(default_factory=_filter_modes)
    version_control: int = 0
    append_arc_name_to_path: int = 0
    shutdown: int = 0
    xmtime: ExtTimeMode = ExtTimeMode.MAX
    xctime: ExtTimeMode = ExtTimeMode.NONE
    xatime: ExtTimeMode = ExtTimeMode.NONE
    preserve_atime: bool = False
    threads: int = 0

    def reset(self):
        """Put every setting back to its default."""
        fresh = type(self)()
        for f in fields(self):
            setattr(self, f.name, getattr(fresh, f.name))
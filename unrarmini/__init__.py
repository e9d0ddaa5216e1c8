"""Building blocks of a minimal RAR unpacker: byte readers, hashes, path and
volume name helpers, time conversion and standard filters."""

__version__ = "0.1.0"
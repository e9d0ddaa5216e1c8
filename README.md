# unrarmini

Pure Python building blocks for reading RAR archives. The package uses only
the standard library.

## What is inside

- `unrarmini.rawint`: integer packing in little-endian and big-endian order
  (`raw_get4`, `raw_put_be8` and the like), 32-bit rotations, byte swapping
  and power-of-two helpers.
- `unrarmini.rawread`: `RawRead`, a buffer for reading archive headers. It
  reads fixed-size integers, RAR variable-length integers (`getv`), raw bytes
  (`getb`) and UTF-16 strings (`getw`). It also computes the RAR 1.5 and
  RAR 5.0 header CRCs (`crc15`, `crc50`). Getters that run past the end of
  the data return zero instead of raising. `raw_get_v` decodes a
  variable-length integer from any byte sequence.
- `unrarmini.sha1` and `unrarmini.sha256`: the incremental hashers `Sha1`
  and `Sha256`. `Sha1.update_rar29` feeds data the way RAR 2.9 does: it
  overwrites each whole block hashed from the writable input buffer.
  `sha256_digest` hashes data in one call.
- `unrarmini.strfn`: string helpers. These cover case-insensitive comparison
  of English letters (`stricomp`, `strnicomp`), command-line parameter
  splitting (`get_cmd_param`) and number formatting (`itoa`, `fmtitoa`).
  They also decode archived names (`arc_char_to_wide`) and compute
  percentages (`to_percent`, `to_percent_unlim`).
- `unrarmini.strlist`: `StringList`, an ordered list of strings with a read
  cursor. Up to 16 cursor positions can be saved and restored.
- `unrarmini.pathfn`: path name handling. It finds the name and extension
  parts and recognises drive letters. It converts between slash styles.
  `convert_path` strips leading drive, UNC, `.` and `..` parts.
- `unrarmini.volname`: volume names for both numbering schemes
  (`next_volume_name`, `get_vol_num_pos`). The new scheme uses names like
  `name.part1.rar` and the old one names like `name.r00`. The module also
  has functions that make file names usable on Windows file systems
  (`is_name_usable`, `make_name_usable`, `make_name_compatible`) and a
  parser for `name;N` version suffixes.
- `unrarmini.rdwrfn`: `ComprDataIO`, a channel from an in-memory source to
  a writable destination buffer, with a limit on the packed size.
- `unrarmini.timefn`: `RarTime`, a time stamp in nanoseconds since 1601. It
  converts to and from Windows FILETIME, Unix time, DOS time and local
  calendar time (`RarLocalTime`). It also parses ISO-like and age texts.
- `unrarmini.rarvm`: `RarVM`, which recognises the RAR 3.x standard filters
  from their code checksum (`prepare`) and runs them (`execute`). The
  filters are E8, E8E9, Itanium, Delta, RGB and Audio.
- `unrarmini.options`: `RarOptions`, the processing settings with their
  defaults, and the enums it uses.

## Examples

```python
from unrarmini.rawread import RawRead
from unrarmini.volname import next_volume_name
from unrarmini.sha256 import sha256_digest

header = RawRead()
header.feed(b"\x96\x01\x05")
print(header.getv())                 # 150
print(header.get1())                 # 5

print(next_volume_name("backup.part1.rar", False))   # backup.part2.rar
print(next_volume_name("backup.rar", True))          # backup.r00

print(sha256_digest(b"abc").hex())
```

## What it does not do

The package does not open archives, parse archive headers into file entries
or decompress data. It has no LZ or PPMd decoder and no encryption. It has
no command-line program. It provides the pieces that such an unpacker uses.

## Running the tests

```
pip install -e ".[test]"
pytest
```
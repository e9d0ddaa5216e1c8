"""Buffered reader of archive header fields."""

import zlib

from .rawint import MASK64


class RawRead:
    """Accumulates raw header bytes and decodes little endian fields from them.

    Field getters past the end of the buffered data return zero instead of
    raising, which lets header parsing run over truncated data and fail on
    CRC checks later.
    """

    def __init__(self, source=None):
        self._source = source
        self.reset()

    def reset(self):
        """Drop all buffered data and return to the start."""
        self._buf = bytearray()
        self._size = 0
        self.pos = 0

    @property
    def size(self):
        """Number of valid buffered bytes."""
        return self._size

    @property
    def padded_size(self):
        """Bytes allocated beyond the valid data."""
        return len(self._buf) - self._size

    @property
    def data_left(self):
        """Valid bytes not yet consumed."""
        return self._size - self.pos

    @property
    def data(self):
        """A copy of the valid buffered bytes."""
        return bytes(self._buf[:self._size])

    def read(self, size):
        """Read up to ``size`` bytes from the source; return how many arrived."""
        if size == 0:
            return 0
        if self._source is None:
            raise ValueError("no source to read from")
        self._buf.extend(bytes(size))
        chunk = bytes(self._source.read(size) or b"")[:size]
        self._buf[self._size:self._size + len(chunk)] = chunk
        self._size += len(chunk)
        return len(chunk)

    def feed(self, data):
        """Append ``data`` to the buffered bytes."""
        if not data:
            return
        data = bytes(data)
        self._buf.extend(bytes(len(data)))
        self._buf[self._size:self._size + len(data)] = data
        self._size += len(data)

    def compact(self):
        """Discard consumed bytes and move unread ones to the front."""
        start = min(self.pos, self._size)
        self._size -= self.pos
        if self._size < 0:
            self._size = 0
        self._buf = bytearray(self._buf[start:start + self._size])
        self.pos = 0

    def get1(self):
        if self.pos < self._size:
            value = self._buf[self.pos]
            self.pos += 1
            return value
        return 0

    def _get_le(self, width):
        if self.pos + width - 1 < self._size:
            value = int.from_bytes(self._buf[self.pos:self.pos + width], "little")
            self.pos += width
            return value
        return 0

    def get2(self):
        return self._get_le(2)

    def get4(self):
        return self._get_le(4)

    def get8(self):
        low = self.get4()
        high = self.get4()
        return (high << 32) | low

    def getv(self):
        """Decode a variable length integer; 0 if it runs past the data."""
        result = 0
        shift = 0
        while self.pos < self._size and shift < 64:
            byte = self._buf[self.pos]
            self.pos += 1
            result = (result + ((byte & 0x7F) << shift)) & MASK64
            if byte & 0x80 == 0:
                return result
            shift += 7
        return 0

    def get_vsize(self, pos):
        """Length in bytes of the variable length integer at ``pos``, or 0."""
        for cur in range(pos, self._size):
            if self._buf[cur] & 0x80 == 0:
                return cur - pos + 1
        return 0

    def getb(self, size):
        """Take up to ``size`` bytes; fewer are returned at the end of data."""
        count = max(0, min(self._size - self.pos, size))
        chunk = bytes(self._buf[self.pos:self.pos + count])
        self.pos += count
        return chunk

    def getw(self, count):
        """Take ``count`` UTF-16LE code units as text, cut at the first NUL.

        Returns an empty string without consuming anything if the data is short.
        """
        if count <= 0:
            return ""
        end = self.pos + 2 * count
        if end - 1 < self._size:
            raw = bytes(self._buf[self.pos:end])
            self.pos = end
            return raw.decode("utf-16-le", "surrogatepass").split("\0", 1)[0]
        return ""

    def crc15(self, processed_only):
        """Header CRC of the 1.5 format: low 16 bits of CRC32 after byte 2."""
        if self._size <= 2:
            return 0
        end = self.pos if processed_only else self._size
        return zlib.crc32(bytes(self._buf[2:end])) & 0xFFFF

    def crc50(self):
        """Header CRC of the 5.0 format: CRC32 of the data after byte 4."""
        if self._size <= 4:
            return 0xFFFFFFFF
        return zlib.crc32(bytes(self._buf[4:self._size]))

    def skip(self, size):
        self.pos += size

    def rewind(self):
        self.pos = 0


def raw_get_v(data, pos=0):
    """Decode a variable length integer from ``data``; return (value, next_pos).

    Raises ValueError if the integer runs past the end of ``data``.
    """
    result = 0
    shift = 0
    while pos < len(data):
        byte = data[pos]
        pos += 1
        result = (result + ((byte & 0x7F) << shift)) & MASK64
        if byte & 0x80 == 0:
            return result, pos
        shift += 7
    raise ValueError("variable length integer runs past the end of data")
"""Memory to memory data channel for the unpacker."""


class ComprDataIO:
    """Feeds packed bytes from a memory source and stores unpacked output.

    Reads are limited both by the source size and by the packed size set
    with :meth:`set_packed_size_to_read`; writes beyond the end of the
    destination buffer are dropped.
    """

    def __init__(self):
        self._src = None
        self._src_pos = 0
        self._dst = None
        self._dst_pos = 0
        self.packed_size = 0
        self._cur_pack_read = 0
        self.unp_volume = False
        self.suspended = False
        self.cur_unp_read = 0
        self.cur_unp_write = 0

    def reset(self):
        """Rewind the source, the destination and the packed read counter."""
        self._src_pos = 0
        self._dst_pos = 0
        self._cur_pack_read = 0

    def set_memory_source(self, data):
        """Read packed data from ``data``, starting at its beginning."""
        self._src = memoryview(bytes(data))
        self._src_pos = 0

    def set_memory_dest(self, buffer):
        """Write unpacked data into the writable ``buffer``."""
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise TypeError("destination buffer must be writable")
        self._dst = view
        self._dst_pos = 0

    def set_packed_size_to_read(self, size):
        """Allow ``size`` more packed bytes to be read."""
        self.packed_size = size
        self._cur_pack_read = 0

    def set_memory_pos(self, pos):
        """Move the read position in the source."""
        self._src_pos = pos

    def unp_read(self, count):
        """Return up to ``count`` packed bytes; empty once all are read."""
        if self._src is None:
            raise ValueError("no memory source set")
        remain = self.packed_size - self._cur_pack_read
        if remain <= 0:
            return b""
        src_remain = max(0, len(self._src) - self._src_pos)
        take = min(count, remain, src_remain)
        if take <= 0:
            return b""
        chunk = bytes(self._src[self._src_pos:self._src_pos + take])
        self._src_pos += take
        self._cur_pack_read += take
        return chunk

    def unp_write(self, data):
        """Store as much of ``data`` as fits; return the number of bytes kept."""
        if self._dst is None:
            return 0
        data = memoryview(data).cast("B")
        take = min(len(data), len(self._dst) - self._dst_pos)
        if take > 0:
            self._dst[self._dst_pos:self._dst_pos + take] = data[:take]
            self._dst_pos += take
            return take
        return 0

    def written_size(self):
        """Bytes stored in the destination so far."""
        return self._dst_pos
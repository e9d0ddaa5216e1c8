"""SHA-1 with the buffer-modifying update used by RAR 2.9 encryption."""

from .rawint import MASK32, rotl32

_INIT = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _transform(state, block):
    """Process one 64-byte block; return the last 16 expanded schedule words."""
    w = [int.from_bytes(block[i:i + 4], "big") for i in range(0, 64, 4)]
    for t in range(16, 80):
        w.append(rotl32(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))
    a, b, c, d, e = state
    for t in range(80):
        if t < 20:
            f = ((b & (c ^ d)) ^ d) + 0x5A827999
        elif t < 40:
            f = (b ^ c ^ d) + 0x6ED9EBA1
        elif t < 60:
            f = (((b | c) & d) | (b & c)) + 0x8F1BBCDC
        else:
            f = (b ^ c ^ d) + 0xCA62C1D6
        temp = (rotl32(a, 5) + f + e + w[t]) & MASK32
        a, b, c, d, e = temp, a, rotl32(b, 30), c, d
    for i, v in enumerate((a, b, c, d, e)):
        state[i] = (state[i] + v) & MASK32
    return w[64:80]


class Sha1:
    """Incremental SHA-1."""

    def __init__(self):
        self._reset()

    def _reset(self):
        self._state = list(_INIT)
        self._count = 0
        self._buffer = bytearray(64)

    def _process(self, data, write_back):
        length = len(data)
        j = self._count & 63
        self._count += length
        if j + length > 63:
            i = 64 - j
            self._buffer[j:64] = data[:i]
            _transform(self._state, self._buffer)
            while i + 63 < length:
                words = _transform(self._state, bytes(data[i:i + 64]))
                if write_back:
                    data[i:i + 64] = b"".join(
                        word.to_bytes(4, "little") for word in words
                    )
                i += 64
            j = 0
        else:
            i = 0
        if length > i:
            self._buffer[j:j + length - i] = data[i:length]

    def update(self, data):
        """Feed more bytes into the hash."""
        self._process(memoryview(data).cast("B"), False)

    def update_rar29(self, data):
        """Feed bytes as RAR 2.9 does, overwriting each whole block hashed
        straight from ``data`` with its last 16 schedule words.

        ``data`` must be a writable buffer.
        """
        view = memoryview(data).cast("B")
        if view.readonly:
            raise TypeError("update_rar29 needs a writable buffer")
        self._process(view, True)

    def digest(self):
        """Finish the hash, return the 20-byte digest and start afresh."""
        bit_length = (self._count * 8) & 0xFFFFFFFFFFFFFFFF
        pos = self._count & 0x3F
        self._buffer[pos] = 0x80
        pos += 1
        if pos != 56:
            if pos > 56:
                self._buffer[pos:64] = bytes(64 - pos)
                pos = 0
            if pos == 0:
                _transform(self._state, self._buffer)
            self._buffer[pos:56] = bytes(56 - pos)
        self._buffer[56:64] = bit_length.to_bytes(8, "big")
        _transform(self._state, self._buffer)
        result = b"".join(v.to_bytes(4, "big") for v in self._state)
        self._reset()
        return result
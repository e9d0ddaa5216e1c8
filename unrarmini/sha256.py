"""SHA-256."""

from .rawint import MASK32, rotr32

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INIT = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _transform(h, block):
    w = [int.from_bytes(block[i:i + 4], "big") for i in range(0, 64, 4)]
    for t in range(16, 64):
        x, y = w[t - 15], w[t - 2]
        s0 = rotr32(x, 7) ^ rotr32(x, 18) ^ (x >> 3)
        s1 = rotr32(y, 17) ^ rotr32(y, 19) ^ (y >> 10)
        w.append((s1 + w[t - 7] + s0 + w[t - 16]) & MASK32)
    a, b, c, d, e, f, g, hh = h
    for t in range(64):
        big_s1 = rotr32(e, 6) ^ rotr32(e, 11) ^ rotr32(e, 25)
        ch = (e & f) ^ (~e & g)
        t1 = (hh + big_s1 + ch + _K[t] + w[t]) & MASK32
        big_s0 = rotr32(a, 2) ^ rotr32(a, 13) ^ rotr32(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & MASK32
        hh, g, f, e = g, f, e, (d + t1) & MASK32
        d, c, b, a = c, b, a, (t1 + t2) & MASK32
    for i, v in enumerate((a, b, c, d, e, f, g, hh)):
        h[i] = (h[i] + v) & MASK32


class Sha256:
    """Incremental SHA-256."""

    digest_size = 32

    def __init__(self):
        self._reset()

    def _reset(self):
        self._h = list(_INIT)
        self._count = 0
        self._buffer = bytearray(64)

    def update(self, data):
        """Feed more bytes into the hash."""
        src = memoryview(data).cast("B")
        pos = self._count & 0x3F
        self._count += len(src)
        offset = 0
        while offset < len(src):
            take = min(64 - pos, len(src) - offset)
            self._buffer[pos:pos + take] = src[offset:offset + take]
            offset += take
            pos += take
            if pos == 64:
                pos = 0
                _transform(self._h, self._buffer)

    def digest(self):
        """Finish the hash, return the 32-byte digest and start afresh."""
        bit_length = (self._count * 8) & 0xFFFFFFFFFFFFFFFF
        pos = self._count & 0x3F
        self._buffer[pos] = 0x80
        pos += 1
        if pos != 56:
            if pos > 56:
                self._buffer[pos:64] = bytes(64 - pos)
                pos = 0
            if pos == 0:
                _transform(self._h, self._buffer)
            self._buffer[pos:56] = bytes(56 - pos)
        self._buffer[56:64] = bit_length.to_bytes(8, "big")
        _transform(self._h, self._buffer)
        result = b"".join(v.to_bytes(4, "big") for v in self._h)
        self._reset()
        return result


def sha256_digest(data):
    """SHA-256 digest of ``data`` in one call."""
    h = Sha256()
    h.update(data)
    return h.digest()
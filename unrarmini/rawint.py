"""Little and big endian integer access to byte buffers, and bit helpers."""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def rotl32(x, n):
    """Rotate a 32-bit value left by ``n`` bits."""
    x &= MASK32
    n &= 31
    return ((x << n) | (x >> (32 - n))) & MASK32


def rotr32(x, n):
    """Rotate a 32-bit value right by ``n`` bits."""
    x &= MASK32
    n &= 31
    return ((x >> n) | (x << (32 - n))) & MASK32


def _check(data, pos, width):
    if pos < 0 or pos + width > len(data):
        raise IndexError(
            f"{width} bytes at offset {pos} exceed buffer of {len(data)} bytes"
        )


def _get(data, pos, width, order):
    _check(data, pos, width)
    return int.from_bytes(bytes(data[pos:pos + width]), order)


def _put(value, data, pos, width, order):
    _check(data, pos, width)
    mask = (1 << (8 * width)) - 1
    data[pos:pos + width] = (value & mask).to_bytes(width, order)


def raw_get2(data, pos=0):
    """Read an unsigned 16-bit little endian value."""
    return _get(data, pos, 2, "little")


def raw_get4(data, pos=0):
    """Read an unsigned 32-bit little endian value."""
    return _get(data, pos, 4, "little")


def raw_get8(data, pos=0):
    """Read an unsigned 64-bit little endian value."""
    return _get(data, pos, 8, "little")


def raw_put2(value, data, pos=0):
    """Store the low 16 bits of ``value`` little endian into ``data``."""
    _put(value, data, pos, 2, "little")


def raw_put4(value, data, pos=0):
    """Store the low 32 bits of ``value`` little endian into ``data``."""
    _put(value, data, pos, 4, "little")


def raw_put8(value, data, pos=0):
    """Store the low 64 bits of ``value`` little endian into ``data``."""
    _put(value, data, pos, 8, "little")


def raw_get_be4(data, pos=0):
    """Read an unsigned 32-bit big endian value."""
    return _get(data, pos, 4, "big")


def raw_get_be8(data, pos=0):
    """Read an unsigned 64-bit big endian value."""
    return _get(data, pos, 8, "big")


def raw_put_be4(value, data, pos=0):
    """Store the low 32 bits of ``value`` big endian into ``data``."""
    _put(value, data, pos, 4, "big")


def raw_put_be8(value, data, pos=0):
    """Store the low 64 bits of ``value`` big endian into ``data``."""
    _put(value, data, pos, 8, "big")


def byte_swap32(value):
    """Reverse the byte order of a 32-bit value."""
    return (rotl32(value, 24) & 0xFF00FF00) | (rotl32(value, 8) & 0x00FF00FF)


def is_pow2(n):
    """True if ``n`` is a power of two; zero counts as one, as in the bit test."""
    n &= MASK64
    return (n & ((n - 1) & MASK64)) == 0


def greater_or_equal_pow2(n):
    """Smallest power of two not less than ``n``."""
    p = 1
    while p < n:
        p *= 2
    return p


def less_or_equal_pow2(n):
    """Largest power of two not greater than ``n``; 1 for ``n`` below 2."""
    p = 1
    while p * 2 <= n:
        p *= 2
    return p
import io
import zlib

import pytest

from unrarmini.rawread import RawRead, raw_get_v


def encode_v(value):
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def test_read_from_source_and_fields():
    payload = bytes(range(1, 20))
    reader = RawRead(io.BytesIO(payload))
    assert reader.read(15) == 15
    assert reader.size == 15
    assert reader.get1() == payload[0]
    assert reader.get2() == int.from_bytes(payload[1:3], "little")
    assert reader.get4() == int.from_bytes(payload[3:7], "little")
    assert reader.get8() == int.from_bytes(payload[7:15], "little")
    assert reader.data_left == 0


def test_short_read_leaves_padding():
    reader = RawRead(io.BytesIO(b"abc"))
    assert reader.read(10) == 3
    assert reader.size == 3
    assert reader.padded_size == 7
    assert reader.data == b"abc"


def test_read_without_source_raises():
    with pytest.raises(ValueError):
        RawRead().read(4)


def test_getters_return_zero_past_end():
    reader = RawRead()
    reader.feed(b"\x01\x02\x03")
    reader.skip(2)
    assert reader.get2() == 0
    assert reader.get4() == 0
    assert reader.pos == 2
    assert reader.get1() == 3
    assert reader.get1() == 0


def test_feed_and_compact():
    reader = RawRead()
    reader.feed(b"hello")
    reader.feed(b"world")
    reader.skip(3)
    reader.compact()
    assert reader.pos == 0
    assert reader.data == b"loworld"
    assert reader.padded_size == 0


@pytest.mark.parametrize("value", [0, 1, 127, 128, 300, 2**35 + 17, 2**63 + 5])
def test_getv_round_trip(value):
    encoded = encode_v(value)
    reader = RawRead()
    reader.feed(encoded + b"\x55")
    assert reader.get_vsize(0) == len(encoded)
    assert reader.getv() == value
    assert reader.get1() == 0x55


def test_getv_pinned_value():
    reader = RawRead()
    reader.feed(b"\x81\x01")
    assert reader.getv() == 129


def test_getv_truncated_returns_zero():
    reader = RawRead()
    reader.feed(b"\x80\x80")
    assert reader.get_vsize(0) == 0
    assert reader.getv() == 0


def test_getb_partial():
    reader = RawRead()
    reader.feed(b"abcdef")
    assert reader.getb(4) == b"abcd"
    assert reader.getb(10) == b"ef"
    assert reader.getb(3) == b""


def test_getw_decodes_utf16():
    reader = RawRead()
    reader.feed("name\0x".encode("utf-16-le"))
    assert reader.getw(6) == "name"
    assert reader.data_left == 0


def test_getw_short_data_is_empty():
    reader = RawRead()
    reader.feed(b"a\x00b")
    assert reader.getw(2) == ""
    assert reader.pos == 0


def test_crc50_matches_crc32_of_tail():
    data = b"\0\0\0\0header-body-data"
    reader = RawRead()
    reader.feed(data)
    assert reader.crc50() == zlib.crc32(data[4:])


def test_crc_short_buffers():
    reader = RawRead()
    reader.feed(b"\1\2")
    assert reader.crc15(False) == 0
    assert reader.crc50() == 0xFFFFFFFF


def test_crc15_processed_only():
    data = b"\0\0abcdefgh"
    reader = RawRead()
    reader.feed(data)
    assert reader.crc15(False) == zlib.crc32(data[2:]) & 0xFFFF
    reader.skip(6)
    assert reader.crc15(True) == zlib.crc32(data[2:6]) & 0xFFFF


def test_reset_and_rewind():
    reader = RawRead()
    reader.feed(b"\x07\x08")
    assert reader.get1() == 7
    reader.rewind()
    assert reader.get1() == 7
    reader.reset()
    assert reader.size == 0
    assert reader.get1() == 0


def test_raw_get_v_round_trip_and_overflow():
    encoded = encode_v(99999)
    assert raw_get_v(b"\xff" + encoded, 1) == (99999, 1 + len(encoded))
    with pytest.raises(ValueError):
        raw_get_v(b"\x80\x80")
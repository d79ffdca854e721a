import struct

import pytest

from yapwkb.cursor import ByteCursor
from yapwkb.errors import TruncatedInputError, WKBParseError


def test_read_byte_advances():
    cur = ByteCursor(b'\x01\x02')
    assert cur.read_byte() == 1
    assert cur.offset == 1
    assert cur.read_byte() == 2
    assert cur.remaining() == 0


def test_read_uint32_both_orders():
    data = struct.pack('<I', 7) + struct.pack('>I', 7)
    cur = ByteCursor(data)
    assert cur.read_uint32(True) == 7
    assert cur.read_uint32(False) == 7
    assert cur.remaining() == 0


def test_read_uint32_is_unsigned():
    cur = ByteCursor(bytes.fromhex('80000003'))
    assert cur.read_uint32(False) == 0x80000003


def test_read_doubles():
    data = struct.pack('<3d', 1.5, -2.0, 3.25) + struct.pack('>2d', 10.0, 5.0)
    cur = ByteCursor(data)
    assert cur.read_doubles(True, 3) == [1.5, -2.0, 3.25]
    assert cur.read_doubles(False, 2) == [10.0, 5.0]
    assert all(isinstance(v, float) for v in ByteCursor(data).read_doubles(True, 1))


def test_read_zero_doubles():
    cur = ByteCursor(b'')
    assert cur.read_doubles(True, 0) == []
    assert cur.offset == 0


def test_accepts_bytearray_and_memoryview():
    assert ByteCursor(bytearray(b'\x05')).read_byte() == 5
    assert ByteCursor(memoryview(b'\x06')).read_byte() == 6


class TestTruncation:
    """reads past the end fail without consuming"""

    def test_byte(self):
        with pytest.raises(TruncatedInputError):
            ByteCursor(b'').read_byte()

    def test_integer(self):
        cur = ByteCursor(b'\x00\x00\x00')
        with pytest.raises(TruncatedInputError) as info:
            cur.read_uint32(True)
        assert info.value.offset == 0
        assert cur.offset == 0
        assert cur.remaining() == 3

    def test_doubles(self):
        cur = ByteCursor(b'\x01' + struct.pack('<d', 1.0))
        cur.read_byte()
        with pytest.raises(TruncatedInputError) as info:
            cur.read_doubles(True, 2)
        assert info.value.offset == 1
        assert 'need 16, have 8' in info.value.message
        assert cur.offset == 1

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            ByteCursor(b'').read_byte()
        assert issubclass(TruncatedInputError, WKBParseError)


def test_release_blocks_reads():
    cur = ByteCursor(b'\x01\x02')
    cur.release()
    with pytest.raises(RuntimeError):
        cur.read_byte()

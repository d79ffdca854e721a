import pytest

from yapwkb.errors import UnknownTypeCodeError, UnsupportedTypeCodeError
from yapwkb.typecode import GeometryType, TypeCode, decode_type_code


def test_plain_codes():
    for raw in range(1, 8):
        tc = decode_type_code(raw)
        assert tc == TypeCode(raw, False, False, False)
        assert tc.dimension == 2


def test_dialects_off_leave_code_untouched():
    tc = decode_type_code(0x80000003)
    assert tc.code == 0x80000003
    assert not (tc.has_z or tc.has_m or tc.has_srid)
    assert decode_type_code(1001).code == 1001


class TestEwkb:

    def test_flags(self):
        tc = decode_type_code(0x80000001 | 0x20000000, support_ewkb=True)
        assert tc.code == 1
        assert tc.has_z and tc.has_srid and not tc.has_m
        assert tc.dimension == 3

    def test_zm(self):
        tc = decode_type_code(0xC0000006, support_ewkb=True)
        assert tc == TypeCode(6, True, True, False)
        assert tc.dimension == 4

    def test_mask_clears_bit_28(self):
        assert decode_type_code(0x10000002, support_ewkb=True).code == 2


class TestWkb12:

    @pytest.mark.parametrize('raw,code,has_z,has_m', [
        (1001, 1, True, False),
        (2002, 2, False, True),
        (3003, 3, True, True),
        (7, 7, False, False),
    ])
    def test_suffix(self, raw, code, has_z, has_m):
        tc = decode_type_code(raw, support_wkb12=True)
        assert (tc.code, tc.has_z, tc.has_m, tc.has_srid) == (code, has_z, has_m, False)

    def test_both_dialects(self):
        # EWKB mask is applied before the modulo
        tc = decode_type_code(0x20000000 | 2001, support_ewkb=True, support_wkb12=True)
        assert tc == TypeCode(1, False, True, True)
        tc = decode_type_code(0x80000000 | 1003, support_ewkb=True, support_wkb12=True)
        assert tc == TypeCode(3, True, False, False)


class TestGeometryType:

    def test_from_code(self):
        assert GeometryType.from_code(3) is GeometryType.POLYGON
        assert str(GeometryType.MULTI_LINE_STRING) == 'MultiLineString'

    def test_unknown(self):
        with pytest.raises(UnknownTypeCodeError) as info:
            GeometryType.from_code(0x80000001, offset=0)
        assert info.value.type_code == 0x80000001
        assert any('support_ewkb' in h for h in info.value.hints)

    @pytest.mark.parametrize('code', [15, 16, 17])
    def test_sfs12_solids_are_unsupported(self, code):
        with pytest.raises(UnsupportedTypeCodeError) as info:
            GeometryType.from_code(code)
        assert 'not supported' in info.value.message
        assert isinstance(info.value, UnknownTypeCodeError)

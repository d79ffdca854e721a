"""
Geometry type codes and the WKB dialects that extend them.

Plain WKB stores the geometry kind as an integer 1..7.  Two dialects add
Z, M and SRID information to the same field:

- PostGIS EWKB sets high bits: ``0x80000000`` (Z), ``0x40000000`` (M) and
  ``0x20000000`` (an SRID integer follows the type code).
- SFS 1.2 adds thousands: ``1000`` (Z), ``2000`` (M), ``3000`` (ZM).

Both may be enabled at once.  The EWKB mask is applied first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from yapwkb.errors import error_unknown_type, error_unsupported_type

EWKB_Z_FLAG = 0x80000000
EWKB_M_FLAG = 0x40000000
EWKB_SRID_FLAG = 0x20000000
EWKB_TYPE_MASK = 0x0FFFFFFF

WKB12_Z_OFFSET = 1000
WKB12_M_OFFSET = 2000

# SFS 1.2 surface types that are recognized but not decoded
_UNSUPPORTED_SFS12 = {
    15: 'PolyhedralSurface',
    16: 'TIN',
    17: 'Triangle',
}


class GeometryType(IntEnum):
    """The seven geometry kinds a WKB record can hold."""
    POINT = 1
    LINE_STRING = 2
    POLYGON = 3
    MULTI_POINT = 4
    MULTI_LINE_STRING = 5
    MULTI_POLYGON = 6
    GEOMETRY_COLLECTION = 7

    @property
    def title(self) -> str:
        return ''.join(word.capitalize() for word in self.name.split('_'))

    @classmethod
    def from_code(cls, code: int, offset: Optional[int] = None) -> 'GeometryType':
        """Map a dialect-stripped type code to a kind, or raise."""
        if code in _UNSUPPORTED_SFS12:
            raise error_unsupported_type(code, _UNSUPPORTED_SFS12[code], offset)
        try:
            return cls(code)
        except ValueError:
            raise error_unknown_type(code, offset) from None

    def __str__(self) -> str:
        return self.title


@dataclass(frozen=True)
class TypeCode:
    """Result of decoding a raw type-code integer."""
    code: int
    has_z: bool = False
    has_m: bool = False
    has_srid: bool = False

    @property
    def dimension(self) -> int:
        return 2 + (1 if self.has_z else 0) + (1 if self.has_m else 0)


def decode_type_code(raw: int, *, support_ewkb: bool = False,
                     support_wkb12: bool = False) -> TypeCode:
    """
    Split a raw type code into a kind code and Z/M/SRID flags.

    The returned ``code`` is not validated; with both dialects disabled it
    is ``raw`` unchanged, so high-bit EWKB codes surface as unknown types.
    When ``has_srid`` is set the caller must read the SRID integer that
    follows the type code.
    """
    code = raw
    has_z = False
    has_m = False
    has_srid = False
    if support_ewkb:
        has_z = has_z or bool(code & EWKB_Z_FLAG)
        has_m = has_m or bool(code & EWKB_M_FLAG)
        has_srid = bool(code & EWKB_SRID_FLAG)
        code &= EWKB_TYPE_MASK
    if support_wkb12:
        thousands = code // 1000
        has_z = has_z or bool(thousands & 1)
        has_m = has_m or bool(thousands & 2)
        code %= 1000
    return TypeCode(code, has_z, has_m, has_srid)

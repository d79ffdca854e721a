"""Default Cartesian geometry model and factory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from yapwkb.factory import GeometryFactory
from yapwkb.typecode import GeometryType


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: Optional[float] = None
    m: Optional[float] = None
    srid: int = 0

    geometry_type = GeometryType.POINT

    @property
    def coords(self) -> Tuple[float, ...]:
        """Ordinates in X, Y[, Z][, M] order."""
        out = [self.x, self.y]
        if self.z is not None:
            out.append(self.z)
        if self.m is not None:
            out.append(self.m)
        return tuple(out)

    def is_empty(self) -> bool:
        return False

    def _coordinates(self) -> List[float]:
        return list(self.coords)

    def to_dict(self) -> Dict[str, Any]:
        return _as_dict(self)


@dataclass(frozen=True)
class LineString:
    points: Tuple[Point, ...] = ()
    srid: int = 0

    geometry_type = GeometryType.LINE_STRING

    def __len__(self) -> int:
        return len(self.points)

    def is_empty(self) -> bool:
        return not self.points

    def is_closed(self) -> bool:
        return bool(self.points) and self.points[0].coords == self.points[-1].coords

    def _coordinates(self) -> List[List[float]]:
        return [p._coordinates() for p in self.points]

    def to_dict(self) -> Dict[str, Any]:
        return _as_dict(self)


@dataclass(frozen=True)
class LinearRing(LineString):
    """A line string used as a polygon boundary."""


@dataclass(frozen=True)
class Polygon:
    exterior: LinearRing = field(default_factory=LinearRing)
    interiors: Tuple[LinearRing, ...] = ()
    srid: int = 0

    geometry_type = GeometryType.POLYGON

    @property
    def rings(self) -> Tuple[LinearRing, ...]:
        return (self.exterior,) + self.interiors

    def is_empty(self) -> bool:
        return self.exterior.is_empty()

    def _coordinates(self) -> List[List[List[float]]]:
        if self.is_empty():
            return []
        return [ring._coordinates() for ring in self.rings]

    def to_dict(self) -> Dict[str, Any]:
        return _as_dict(self)


@dataclass(frozen=True)
class _Multi:
    geoms: Tuple[Any, ...] = ()
    srid: int = 0

    def __len__(self) -> int:
        return len(self.geoms)

    def __iter__(self):
        return iter(self.geoms)

    def __getitem__(self, index):
        return self.geoms[index]

    def is_empty(self) -> bool:
        return not self.geoms

    def _coordinates(self) -> List[Any]:
        return [g._coordinates() for g in self.geoms]

    def to_dict(self) -> Dict[str, Any]:
        return _as_dict(self)


@dataclass(frozen=True)
class MultiPoint(_Multi):
    geometry_type = GeometryType.MULTI_POINT


@dataclass(frozen=True)
class MultiLineString(_Multi):
    geometry_type = GeometryType.MULTI_LINE_STRING


@dataclass(frozen=True)
class MultiPolygon(_Multi):
    geometry_type = GeometryType.MULTI_POLYGON


@dataclass(frozen=True)
class GeometryCollection(_Multi):
    geometry_type = GeometryType.GEOMETRY_COLLECTION

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.geometry_type.title,
            'srid': self.srid,
            'geometries': [g.to_dict() for g in self.geoms],
        }


def _as_dict(geom) -> Dict[str, Any]:
    # GeoJSON-like; used by the CLI for --json output
    return {
        'type': geom.geometry_type.title,
        'srid': geom.srid,
        'coordinates': geom._coordinates(),
    }


class CartesianFactory(GeometryFactory):
    """
    Factory for the bundled Cartesian model.

    Z and M are optional per point; passing one the factory does not
    support raises ``ValueError``.
    """

    def __init__(self, srid: int = 0, support_z: bool = False, support_m: bool = False):
        self._srid = int(srid)
        self._support_z = bool(support_z)
        self._support_m = bool(support_m)

    @property
    def dimension(self) -> int:
        return 2 + (1 if self._support_z else 0) + (1 if self._support_m else 0)

    def __repr__(self) -> str:
        return (f"CartesianFactory(srid={self._srid}, support_z={self._support_z}, "
                f"support_m={self._support_m})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, CartesianFactory):
            return NotImplemented
        return (self._srid, self._support_z, self._support_m) == \
            (other._srid, other._support_z, other._support_m)

    def __hash__(self) -> int:
        return hash((CartesianFactory, self._srid, self._support_z, self._support_m))

    def point(self, x: float, y: float, z: Optional[float] = None,
              m: Optional[float] = None) -> Point:
        if z is not None and not self._support_z:
            raise ValueError("factory does not support Z coordinates")
        if m is not None and not self._support_m:
            raise ValueError("factory does not support M coordinates")
        return Point(float(x), float(y),
                     None if z is None else float(z),
                     None if m is None else float(m),
                     self._srid)

    def line_string(self, points: Sequence[Point]) -> LineString:
        return LineString(tuple(points), self._srid)

    def linear_ring(self, points: Sequence[Point]) -> LinearRing:
        return LinearRing(tuple(points), self._srid)

    def _ring(self, ring) -> LinearRing:
        if isinstance(ring, LinearRing):
            return ring
        return self.linear_ring(ring.points)

    def polygon(self, exterior, interiors: Sequence = ()) -> Polygon:
        return Polygon(self._ring(exterior), tuple(self._ring(r) for r in interiors), self._srid)

    def multi_point(self, points: Sequence[Point]) -> MultiPoint:
        return MultiPoint(tuple(points), self._srid)

    def multi_line_string(self, line_strings: Sequence[LineString]) -> MultiLineString:
        return MultiLineString(tuple(line_strings), self._srid)

    def multi_polygon(self, polygons: Sequence[Polygon]) -> MultiPolygon:
        return MultiPolygon(tuple(polygons), self._srid)

    def collection(self, geometries: Sequence[Any]) -> GeometryCollection:
        return GeometryCollection(tuple(geometries), self._srid)


def preferred_factory() -> CartesianFactory:
    """2D factory used when nothing else is configured."""
    return CartesianFactory()


def cartesian_resolver(srid: int, has_z: bool, has_m: bool) -> CartesianFactory:
    """Factory resolver matching the dimensions and SRID of the input."""
    return CartesianFactory(srid=srid, support_z=has_z, support_m=has_m)

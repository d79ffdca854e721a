"""Geometry factory producing Shapely geometries.

Requires the ``shapely`` extra.  Shapely has no M ordinate, so this
factory never advertises M support; Z is on by default.
"""

from __future__ import annotations

from typing import Optional, Sequence

import shapely
from shapely import geometry as sg

from yapwkb.factory import GeometryFactory


class ShapelyFactory(GeometryFactory):
    """
    Factory building ``shapely.geometry`` objects.

    A nonzero ``srid`` is stored on every geometry with ``shapely.set_srid``.
    """

    def __init__(self, srid: int = 0, support_z: bool = True):
        self._srid = int(srid)
        self._support_z = bool(support_z)
        self._support_m = False

    def __repr__(self) -> str:
        return f"ShapelyFactory(srid={self._srid}, support_z={self._support_z})"

    def _tag(self, geom):
        if self._srid:
            return shapely.set_srid(geom, self._srid)
        return geom

    def point(self, x: float, y: float, z: Optional[float] = None,
              m: Optional[float] = None):
        if m is not None:
            raise ValueError("Shapely geometries have no M ordinate")
        if z is None:
            return self._tag(sg.Point(x, y))
        return self._tag(sg.Point(x, y, z))

    def line_string(self, points: Sequence):
        coords = [p.coords[0] for p in points]
        return self._tag(sg.LineString(coords) if coords else sg.LineString())

    def linear_ring(self, points: Sequence):
        coords = [p.coords[0] for p in points]
        return self._tag(sg.LinearRing(coords) if coords else sg.LinearRing())

    def polygon(self, exterior, interiors: Sequence = ()):
        if exterior.is_empty:
            return self._tag(sg.Polygon())
        holes = [list(ring.coords) for ring in interiors]
        return self._tag(sg.Polygon(list(exterior.coords), holes))

    def multi_point(self, points: Sequence):
        return self._tag(sg.MultiPoint(list(points)) if points else sg.MultiPoint())

    def multi_line_string(self, line_strings: Sequence):
        return self._tag(sg.MultiLineString(list(line_strings)) if line_strings else sg.MultiLineString())

    def multi_polygon(self, polygons: Sequence):
        return self._tag(sg.MultiPolygon(list(polygons)) if polygons else sg.MultiPolygon())

    def collection(self, geometries: Sequence):
        return self._tag(sg.GeometryCollection(list(geometries)))


def shapely_resolver(srid: int, has_z: bool, has_m: bool) -> ShapelyFactory:
    """Factory resolver carrying the SRID of the input; M data is rejected."""
    return ShapelyFactory(srid=srid, support_z=True)

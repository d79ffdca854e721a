import pytest

from yapwkb.cartesian import (
    CartesianFactory,
    GeometryCollection,
    LinearRing,
    LineString,
    Point,
    Polygon,
    cartesian_resolver,
    preferred_factory,
)
from yapwkb.factory import Capability, GeometryFactory


class TestFactory:

    def test_capabilities(self):
        fac = CartesianFactory(support_z=True)
        assert isinstance(fac, GeometryFactory)
        assert fac.has_capability(Capability.Z_COORDINATE)
        assert not fac.has_capability(Capability.M_COORDINATE)
        assert fac.dimension == 3

    def test_preferred_is_2d(self):
        fac = preferred_factory()
        assert fac.dimension == 2
        assert fac.srid == 0

    def test_resolver(self):
        fac = cartesian_resolver(4326, False, True)
        assert fac == CartesianFactory(4326, False, True)
        assert fac.point(1, 2, m=3) == Point(1.0, 2.0, None, 3.0, 4326)

    def test_unsupported_ordinates(self):
        with pytest.raises(ValueError):
            CartesianFactory().point(1, 2, 3)
        with pytest.raises(ValueError):
            CartesianFactory(support_z=True).point(1, 2, m=3)

    def test_ordinates_below_factory_dimension(self):
        fac = CartesianFactory(support_z=True, support_m=True)
        assert fac.point(1, 2) == Point(1.0, 2.0)
        assert fac.point(1, 2, z=3) == Point(1.0, 2.0, 3.0, None)
        assert fac.point(1, 2, m=4) == Point(1.0, 2.0, None, 4.0)
        assert fac.point(1, 2, 3, 4).coords == (1.0, 2.0, 3.0, 4.0)

    def test_polygon_converts_line_strings(self):
        fac = CartesianFactory()
        pts = [fac.point(0, 0), fac.point(1, 0), fac.point(0, 1), fac.point(0, 0)]
        poly = fac.polygon(fac.line_string(pts), [fac.line_string(pts)])
        assert type(poly.exterior) is LinearRing
        assert type(poly.interiors[0]) is LinearRing
        assert len(poly.rings) == 2


class TestGeometry:

    def test_point_coords(self):
        assert Point(1, 2).coords == (1, 2)
        assert Point(1, 2, 3, 4).coords == (1, 2, 3, 4)
        assert Point(1, 2, m=4).coords == (1, 2, 4)

    def test_line_string_vs_ring_equality(self):
        pts = (Point(0.0, 0.0), Point(1.0, 1.0))
        assert LineString(pts) != LinearRing(pts)
        assert LineString(pts) == LineString(pts)

    def test_to_dict(self):
        ring = LinearRing((Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 0.0)), 3857)
        poly = Polygon(ring, (), 3857)
        assert poly.to_dict() == {
            'type': 'Polygon',
            'srid': 3857,
            'coordinates': [[[0.0, 0.0], [1.0, 0.0], [0.0, 0.0]]],
        }
        assert Polygon().to_dict()['coordinates'] == []

    def test_collection_to_dict(self):
        coll = GeometryCollection((Point(1.0, 2.0), LineString()))
        doc = coll.to_dict()
        assert doc['type'] == 'GeometryCollection'
        assert doc['geometries'][0] == {'type': 'Point', 'srid': 0, 'coordinates': [1.0, 2.0]}
        assert doc['geometries'][1]['coordinates'] == []

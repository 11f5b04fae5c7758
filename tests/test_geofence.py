"""Tests for the geofence operation."""

import asyncio

import pytest

from geoflux import GeoJson
from geoflux.geofence import points_in_polygon, points_in_ring
from geoflux.models import GeoPoint, GeoSerie, Point, Polygon, SerieType


def make_point(latitude, longitude, name="serie"):
    return Point(name=name, geo_point=GeoPoint(latitude=latitude, longitude=longitude))


def make_ring(*lat_lons):
    return GeoSerie(
        name="serie",
        type=SerieType.POLYGON,
        geo_points=[GeoPoint(latitude=lat, longitude=lon) for lat, lon in lat_lons],
    )


@pytest.fixture
def square():
    return make_ring((0, 0), (0, 10), (10, 10), (10, 0), (0, 0))


class TestGeofence:
    def test_inside_and_outside(self, square):
        polygon = Polygon(name="fence", geo_series=[square])
        inside, outside = make_point(5, 5), make_point(50, 50)

        result = asyncio.run(GeoJson().geofence(polygon, [inside, outside]))

        assert result == [inside]

    def test_point_in_several_rings_is_repeated(self, square):
        hole = make_ring((2, 2), (2, 8), (8, 8), (8, 2), (2, 2))
        polygon = Polygon(name="fence", geo_series=[square, hole])
        point = make_point(5, 5)

        assert points_in_polygon(polygon, [point]) == [point, point]

    def test_boundary_point_is_outside(self, square):
        assert not points_in_ring(square, [make_point(0, 5)])[0]

    def test_degenerate_ring_contains_nothing(self):
        ring = make_ring((0, 0), (10, 10))
        assert points_in_ring(ring, [make_point(5, 5)]).tolist() == [False]

    def test_no_points(self, square):
        polygon = Polygon(name="fence", geo_series=[square])
        assert points_in_polygon(polygon, []) == []

    def test_decoded_polygon(self, point_and_polygon_content, make_collection, make_feature):
        async def run():
            geo = GeoJson()
            await geo.parse(point_and_polygon_content)
            await geo.parse(
                make_collection(
                    make_feature("Point", [2.0, 1.0]),
                    make_feature("Point", [20.0, 1.0]),
                )
            )
            return await geo.geofence(geo.polygons[0], geo.points)

        fenced = asyncio.run(run())
        assert [(p.geo_point.latitude, p.geo_point.longitude) for p in fenced] == [
            (1.0, 2.0)
        ]

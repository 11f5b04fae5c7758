"""Tests for the geometry model."""

import shapely

from geoflux.models import (
    Feature,
    FeatureType,
    GeoPoint,
    GeoSerie,
    Line,
    MultiLine,
    MultiPolygon,
    Point,
    Polygon,
    SerieType,
)


def serie(serie_type, *lon_lats):
    return GeoSerie(
        name="serie",
        type=serie_type,
        geo_points=[GeoPoint(latitude=lat, longitude=lon) for lon, lat in lon_lats],
    )


class TestFeature:
    def test_type_name_and_length_come_from_geometry(self):
        line = Line(name="Road", geo_serie=serie(SerieType.LINE, (0, 0), (1, 1)))
        feature = Feature(geometry=line, properties={"lanes": 2})

        assert feature.type is FeatureType.LINE
        assert feature.name == "Road"
        assert feature.length == 2

    def test_equality_supports_membership(self):
        point = Point(name="Lyon", geo_point=GeoPoint(45.75, 4.85))
        same = Point(name="Lyon", geo_point=GeoPoint(45.75, 4.85))
        assert same in [point]
        assert Feature(point) == Feature(same)

    def test_geo_interface(self):
        point = Point(name="Lyon", geo_point=GeoPoint(45.75, 4.85))
        interface = Feature(point, {"name": "Lyon"}).__geo_interface__

        assert interface["type"] == "Feature"
        assert interface["geometry"]["type"] == "Point"
        assert interface["geometry"]["coordinates"] == [4.85, 45.75]
        assert interface["properties"] == {"name": "Lyon"}


class TestSerialization:
    def test_polygon_round_trips_to_source_shape(self):
        coordinates = [[[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 0.0]]]
        polygon = Polygon(
            name="Zone",
            geo_series=[serie(SerieType.POLYGON, *map(tuple, coordinates[0]))],
        )
        assert polygon.__geo_interface__["coordinates"] == coordinates

    def test_multiline_and_multipolygon_nesting(self):
        line = Line(name="a", geo_serie=serie(SerieType.LINE, (0, 0), (1, 0)))
        multiline = MultiLine(name="m", lines=[line, line])
        assert multiline.__geo_interface__["coordinates"] == [
            [[0, 0], [1, 0]],
            [[0, 0], [1, 0]],
        ]

        ring = serie(SerieType.POLYGON, (0, 0), (1, 0), (1, 1), (0, 0))
        multipolygon = MultiPolygon(
            name="m", polygons=[Polygon(name="p", geo_series=[ring])]
        )
        assert len(multipolygon.__geo_interface__["coordinates"][0][0]) == 4

    def test_to_shapely(self):
        outer = serie(SerieType.POLYGON, (0, 0), (10, 0), (10, 10), (0, 10), (0, 0))
        hole = serie(SerieType.POLYGON, (2, 2), (4, 2), (4, 4), (2, 4), (2, 2))
        polygon = Polygon(name="p", geo_series=[outer, hole]).to_shapely()

        assert isinstance(polygon, shapely.Polygon)
        assert polygon.area == 96.0
        assert GeoPoint(latitude=3, longitude=8).to_shapely().within(polygon)

import json

import pytest


def feature(geometry_type, coordinates, properties=None):
    return {
        "type": "Feature",
        "geometry": {"type": geometry_type, "coordinates": coordinates},
        "properties": {} if properties is None else properties,
    }


def collection(*features):
    return json.dumps({"type": "FeatureCollection", "features": list(features)})


@pytest.fixture
def all_kinds_content():
    """One feature of every supported geometry kind, in document order."""
    return collection(
        feature("Point", [4.85, 45.75], {"name": "Lyon"}),
        feature("MultiPoint", [[2.35, 48.85], [5.37, 43.3]], {"name": "Cities"}),
        feature("LineString", [[0.0, 0.0], [1.0, 1.0], [2.0, 1.0]], {"name": "Road"}),
        feature(
            "MultiLineString",
            [[[0.0, 0.0], [1.0, 0.0]], [[2.0, 2.0], [3.0, 3.0], [4.0, 3.0]]],
        ),
        feature(
            "Polygon",
            [[[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0]]],
            {"name": "Square"},
        ),
        feature(
            "MultiPolygon",
            [
                [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0]]],
                [[[5.0, 5.0], [6.0, 5.0], [6.0, 6.0], [5.0, 5.0]]],
            ],
        ),
    )


@pytest.fixture
def point_and_polygon_content():
    return collection(
        feature("Point", [4.85, 45.75], {"name": "Lyon", "country": "France"}),
        feature(
            "Polygon",
            [[[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 0.0]]],
            {"name": "Zone", "country": "France"},
        ),
    )


@pytest.fixture
def make_feature():
    return feature


@pytest.fixture
def make_collection():
    return collection

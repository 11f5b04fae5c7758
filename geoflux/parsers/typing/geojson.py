from enum import Enum
from typing import Any, NotRequired, TypedDict


class GeoJSONType(Enum):
    POINT = "Point"
    MULTIPOINT = "MultiPoint"
    LINESTRING = "LineString"
    MULTILINESTRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTIPOLYGON = "MultiPolygon"


class GeoJSONObject(TypedDict):
    type: str


class GeoJSONGeometry(GeoJSONObject):
    coordinates: list[Any]


class GeoJSONFeature(TypedDict):
    geometry: GeoJSONGeometry
    properties: NotRequired[dict[str, Any] | None]


class GeoJSONFeatureCollection(TypedDict):
    features: list[GeoJSONFeature]

from geoflux.parsers.typing.geojson import (
    GeoJSONFeature,
    GeoJSONFeatureCollection,
    GeoJSONGeometry,
    GeoJSONObject,
    GeoJSONType,
)

__all__ = [
    "GeoJSONType",
    "GeoJSONObject",
    "GeoJSONGeometry",
    "GeoJSONFeature",
    "GeoJSONFeatureCollection",
]

from geoflux.models.feature import Feature
from geoflux.models.geometry import (
    FeatureType,
    GeoPoint,
    GeoSerie,
    Geometry,
    Line,
    MultiLine,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    SerieType,
)

__all__ = [
    "Feature",
    "FeatureType",
    "GeoPoint",
    "GeoSerie",
    "Geometry",
    "Line",
    "MultiLine",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "SerieType",
]

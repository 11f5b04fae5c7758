"""
geoflux: asynchronous GeoJSON decoding into typed geometry collections.

Features are decoded in a background worker and published one at a time on
per-kind streams, optionally filtered by a query, while the typed lists of a
``GeoJson`` instance fill up.
"""

from geoflux.core import GeoJson
from geoflux.exceptions import (
    GeoJsonError,
    GeoJsonFileNotFoundError,
    GeoJsonFileUnreadableError,
    InvalidArgumentError,
    MalformedCoordinateError,
    MalformedDocumentError,
    QueryTypeMismatchError,
    UnsupportedGeometryError,
)
from geoflux.models import (
    Feature,
    FeatureType,
    GeoPoint,
    GeoSerie,
    Line,
    MultiLine,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    SerieType,
)
from geoflux.parsers import GeoJsonQuery, SearchType

__version__ = "0.1.0"
__all__ = [
    "Feature",
    "FeatureType",
    "GeoJson",
    "GeoJsonError",
    "GeoJsonFileNotFoundError",
    "GeoJsonFileUnreadableError",
    "GeoJsonQuery",
    "GeoPoint",
    "GeoSerie",
    "InvalidArgumentError",
    "Line",
    "MalformedCoordinateError",
    "MalformedDocumentError",
    "MultiLine",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "QueryTypeMismatchError",
    "SearchType",
    "SerieType",
    "UnsupportedGeometryError",
]

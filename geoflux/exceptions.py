"""Errors raised while reading, decoding and querying GeoJSON documents."""


class GeoJsonError(Exception):
    """Base class for every error raised by geoflux."""


class GeoJsonFileNotFoundError(GeoJsonError, FileNotFoundError):
    """The GeoJSON file to parse does not exist."""


class GeoJsonFileUnreadableError(GeoJsonError, OSError):
    """The GeoJSON file exists but could not be read as UTF-8 text."""


class MalformedDocumentError(GeoJsonError, ValueError):
    """The document is not JSON or has no usable top-level feature list."""


class UnsupportedGeometryError(GeoJsonError, ValueError):
    """A feature carries a geometry type that cannot be decoded.

    Args:
        geometry_type: The ``geometry.type`` value found in the document.
    """

    def __init__(self, geometry_type: str) -> None:
        super().__init__(f"Unsupported geometry type: {geometry_type}")
        self.geometry_type = geometry_type


class MalformedCoordinateError(GeoJsonError, ValueError):
    """A coordinate component cannot be parsed as a number."""


class QueryTypeMismatchError(GeoJsonError, TypeError):
    """A prefix or substring query was run against a non-string value."""


class InvalidArgumentError(GeoJsonError, ValueError):
    """An operation was called with arguments it cannot work with."""

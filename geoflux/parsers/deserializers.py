"""Build typed geometries from GeoJSON coordinate arrays."""

from typing import Any

from geoflux.exceptions import MalformedCoordinateError
from geoflux.models import (
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


PLACEHOLDER_NAME = "serie"


def _stringify(value: Any) -> str:
    """Render a property value the way it would appear in JSON text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_name(
    properties: dict[str, Any],
    name_property: str | None = None,
    index: int | None = None,
) -> str:
    """Derive a geometry name from the feature properties.

    The ``name_property`` value wins over a ``"name"`` property. When neither
    yields a value, or the value renders as ``"null"``, a placeholder is
    returned: ``serie`` or ``serie_<index>`` for indexed sub-parts.

    Args:
        properties: The properties of the enclosing GeoJSON feature.
        name_property: Optional key to read the name from.
        index: 1-based position of the sub-part in a multi geometry.

    Returns:
        The geometry name.
    """
    name = None
    if name_property is not None:
        name = _stringify(properties.get(name_property))
    elif "name" in properties:
        name = _stringify(properties["name"])

    if name is None or name == "null":
        name = PLACEHOLDER_NAME if index is None else f"{PLACEHOLDER_NAME}_{index}"
    return name


def _parse_number(value: Any) -> float:
    if isinstance(value, bool):
        raise MalformedCoordinateError(f"{value!r} is not a number")
    if isinstance(value, str) and "_" in value:
        raise MalformedCoordinateError(f"{value!r} is not a number")
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise MalformedCoordinateError(f"{value!r} is not a number") from e


def _as_list(coordinates: Any) -> list[Any]:
    if not isinstance(coordinates, list | tuple):
        raise MalformedCoordinateError(
            f"Expected a list of coordinates, got {coordinates!r}"
        )
    return list(coordinates)


def get_geo_point(coordinate: Any, name: str | None = None) -> GeoPoint:
    """Parse a (longitude, latitude) pair into a latitude-first GeoPoint."""
    pair = _as_list(coordinate)
    if len(pair) < 2:
        raise MalformedCoordinateError(
            f"A coordinate needs a longitude and a latitude, got {coordinate!r}"
        )
    return GeoPoint(
        latitude=_parse_number(pair[1]),
        longitude=_parse_number(pair[0]),
        name=name,
    )


def get_geo_points(coordinates: Any) -> list[GeoPoint]:
    return [get_geo_point(coordinate) for coordinate in _as_list(coordinates)]


def get_point(
    coordinates: Any,
    properties: dict[str, Any],
    name_property: str | None = None,
) -> Point:
    name = get_name(properties, name_property)
    return Point(name=name, geo_point=get_geo_point(coordinates, name=name))


def get_multipoint(
    coordinates: Any,
    properties: dict[str, Any],
    name_property: str | None = None,
) -> MultiPoint:
    name = get_name(properties, name_property)
    geo_serie = GeoSerie(
        name=name, type=SerieType.GROUP, geo_points=get_geo_points(coordinates)
    )
    return MultiPoint(name=name, geo_serie=geo_serie)


def get_line(
    coordinates: Any,
    properties: dict[str, Any],
    name_property: str | None = None,
) -> Line:
    name = get_name(properties, name_property)
    geo_serie = GeoSerie(
        name=name, type=SerieType.LINE, geo_points=get_geo_points(coordinates)
    )
    return Line(name=name, geo_serie=geo_serie)


def get_multiline(
    coordinates: Any,
    properties: dict[str, Any],
    name_property: str | None = None,
) -> MultiLine:
    """Decode a MultiLineString.

    Each inner line is named with its 1-based index while its serie keeps the
    feature name.
    """
    name = get_name(properties, name_property)
    lines = [
        Line(
            name=get_name(properties, name_property, index=i),
            geo_serie=GeoSerie(
                name=name, type=SerieType.LINE, geo_points=get_geo_points(line)
            ),
        )
        for i, line in enumerate(_as_list(coordinates), start=1)
    ]
    return MultiLine(name=name, lines=lines)


def _get_rings(coordinates: Any, name: str) -> list[GeoSerie]:
    return [
        GeoSerie(name=name, type=SerieType.POLYGON, geo_points=get_geo_points(ring))
        for ring in _as_list(coordinates)
    ]


def get_polygon(
    coordinates: Any,
    properties: dict[str, Any],
    name_property: str | None = None,
) -> Polygon:
    name = get_name(properties, name_property)
    return Polygon(name=name, geo_series=_get_rings(coordinates, name))


def get_multipolygon(
    coordinates: Any,
    properties: dict[str, Any],
    name_property: str | None = None,
) -> MultiPolygon:
    """Decode a MultiPolygon.

    Polygons are named with their 1-based index, their rings keep the feature
    name.
    """
    name = get_name(properties, name_property)
    polygons = [
        Polygon(
            name=get_name(properties, name_property, index=i),
            geo_series=_get_rings(polygon, name),
        )
        for i, polygon in enumerate(_as_list(coordinates), start=1)
    ]
    return MultiPolygon(name=name, polygons=polygons)

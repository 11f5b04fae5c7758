"""Typed geometry value objects decoded from GeoJSON coordinates.

Coordinates are stored latitude first. ``__geo_interface__`` and ``to_shapely``
convert back to the GeoJSON (longitude, latitude) order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

import geojson
import shapely


class FeatureType(Enum):
    """Kind of geometry carried by a decoded feature."""

    POINT = "point"
    MULTIPOINT = "multipoint"
    LINE = "line"
    MULTILINE = "multiline"
    POLYGON = "polygon"
    MULTIPOLYGON = "multipolygon"


class SerieType(Enum):
    GROUP = "group"
    LINE = "line"
    POLYGON = "polygon"


@dataclass(frozen=True)
class GeoPoint:
    """A single geographic coordinate."""

    latitude: float
    longitude: float
    name: str | None = None

    @property
    def coordinates(self) -> tuple[float, float]:
        """The (longitude, latitude) pair in GeoJSON order."""
        return (self.longitude, self.latitude)

    def to_shapely(self) -> shapely.Point:
        return shapely.Point(self.longitude, self.latitude)


@dataclass
class GeoSerie:
    """A named ordered sequence of coordinates forming a group, line or ring."""

    name: str
    type: SerieType
    geo_points: list[GeoPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.geo_points)

    @property
    def coordinates(self) -> list[tuple[float, float]]:
        return [geo_point.coordinates for geo_point in self.geo_points]

    def to_shapely(self) -> shapely.Geometry:
        """Convert the serie to the matching shapely geometry.

        Returns:
            A MultiPoint for groups, a LineString for lines and a Polygon
            without holes for rings.
        """
        match self.type:
            case SerieType.GROUP:
                return shapely.MultiPoint(self.coordinates)
            case SerieType.LINE:
                return shapely.LineString(self.coordinates)
            case SerieType.POLYGON:
                return shapely.Polygon(self.coordinates)


class Geometry(ABC):
    """Base class of the six decoded geometry kinds."""

    feature_type: ClassVar[FeatureType]
    name: str

    @property
    @abstractmethod
    def length(self) -> int:
        """Number of coordinates held by the geometry."""

    @property
    @abstractmethod
    def __geo_interface__(self) -> dict[str, Any]:
        """The geometry as a ``geojson`` object."""


@dataclass
class Point(Geometry):
    feature_type: ClassVar[FeatureType] = FeatureType.POINT

    name: str
    geo_point: GeoPoint

    @property
    def length(self) -> int:
        return 1

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return geojson.Point(self.geo_point.coordinates)

    def to_shapely(self) -> shapely.Point:
        return self.geo_point.to_shapely()


@dataclass
class MultiPoint(Geometry):
    feature_type: ClassVar[FeatureType] = FeatureType.MULTIPOINT

    name: str
    geo_serie: GeoSerie

    @property
    def length(self) -> int:
        return len(self.geo_serie)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return geojson.MultiPoint(self.geo_serie.coordinates)

    def to_shapely(self) -> shapely.MultiPoint:
        return shapely.MultiPoint(self.geo_serie.coordinates)


@dataclass
class Line(Geometry):
    feature_type: ClassVar[FeatureType] = FeatureType.LINE

    name: str
    geo_serie: GeoSerie

    @property
    def length(self) -> int:
        return len(self.geo_serie)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return geojson.LineString(self.geo_serie.coordinates)

    def to_shapely(self) -> shapely.LineString:
        return shapely.LineString(self.geo_serie.coordinates)


@dataclass
class MultiLine(Geometry):
    feature_type: ClassVar[FeatureType] = FeatureType.MULTILINE

    name: str
    lines: list[Line] = field(default_factory=list)

    @property
    def length(self) -> int:
        return sum(line.length for line in self.lines)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return geojson.MultiLineString(
            [line.geo_serie.coordinates for line in self.lines]
        )

    def to_shapely(self) -> shapely.MultiLineString:
        return shapely.MultiLineString(
            [line.geo_serie.coordinates for line in self.lines]
        )


@dataclass
class Polygon(Geometry):
    """A polygon whose first ring is the outer boundary and the rest are holes."""

    feature_type: ClassVar[FeatureType] = FeatureType.POLYGON

    name: str
    geo_series: list[GeoSerie] = field(default_factory=list)

    @property
    def length(self) -> int:
        return sum(len(geo_serie) for geo_serie in self.geo_series)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return geojson.Polygon([ring.coordinates for ring in self.geo_series])

    def to_shapely(self) -> shapely.Polygon:
        if not self.geo_series:
            return shapely.Polygon()
        return shapely.Polygon(
            self.geo_series[0].coordinates,
            [ring.coordinates for ring in self.geo_series[1:]],
        )


@dataclass
class MultiPolygon(Geometry):
    feature_type: ClassVar[FeatureType] = FeatureType.MULTIPOLYGON

    name: str
    polygons: list[Polygon] = field(default_factory=list)

    @property
    def length(self) -> int:
        return sum(polygon.length for polygon in self.polygons)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return geojson.MultiPolygon(
            [
                [ring.coordinates for ring in polygon.geo_series]
                for polygon in self.polygons
            ]
        )

    def to_shapely(self) -> shapely.MultiPolygon:
        return shapely.MultiPolygon(
            [polygon.to_shapely() for polygon in self.polygons]
        )

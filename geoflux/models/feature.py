from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import geojson

from geoflux.models.geometry import FeatureType, Geometry


G = TypeVar("G", bound=Geometry)


@dataclass
class Feature(Generic[G]):
    """A decoded geometry together with the properties of its GeoJSON feature.

    The type tag is read from the geometry, so it always matches the payload.
    """

    geometry: G
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> FeatureType:
        return self.geometry.feature_type

    @property
    def name(self) -> str:
        return self.geometry.name

    @property
    def length(self) -> int:
        return self.geometry.length

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return geojson.Feature(
            geometry=self.geometry.__geo_interface__, properties=self.properties
        )

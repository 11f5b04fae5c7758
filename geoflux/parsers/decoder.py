"""Decode a GeoJSON FeatureCollection into typed features.

The decoder runs in a worker thread. ``FeatureDecoder.run`` hands every
accepted feature to a ``send`` callable, followed by an ``EndOfStream`` marker
or a ``DecodeFailure`` carrying the error that stopped the pass.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

import geojson

from geoflux.exceptions import MalformedDocumentError, UnsupportedGeometryError
from geoflux.models import Feature, FeatureType, Geometry
from geoflux.parsers.deserializers import (
    get_line,
    get_multiline,
    get_multipoint,
    get_multipolygon,
    get_point,
    get_polygon,
)
from geoflux.parsers.query import GeoJsonQuery, check_property, feature_type_matches
from geoflux.parsers.typing import (
    GeoJSONFeature,
    GeoJSONFeatureCollection,
    GeoJSONType,
)


logger = logging.getLogger(__name__)

GeometryFactory = Callable[[Any, dict[str, Any], str | None], Geometry]

GEOMETRY_FACTORIES: dict[GeoJSONType, tuple[FeatureType, GeometryFactory]] = {
    GeoJSONType.POINT: (FeatureType.POINT, get_point),
    GeoJSONType.MULTIPOINT: (FeatureType.MULTIPOINT, get_multipoint),
    GeoJSONType.LINESTRING: (FeatureType.LINE, get_line),
    GeoJSONType.MULTILINESTRING: (FeatureType.MULTILINE, get_multiline),
    GeoJSONType.POLYGON: (FeatureType.POLYGON, get_polygon),
    GeoJSONType.MULTIPOLYGON: (FeatureType.MULTIPOLYGON, get_multipolygon),
}


class DecoderState(Enum):
    IDLE = "idle"
    DECODING = "decoding"
    FINISHED = "finished"
    FAILED = "failed"


@dataclass(frozen=True)
class EndOfStream:
    """Marks the successful end of a decode pass."""


@dataclass(frozen=True)
class DecodeFailure:
    """Carries the exception that aborted a decode pass."""

    error: BaseException


DecoderMessage = Feature | EndOfStream | DecodeFailure


def load_features(data: str) -> list[GeoJSONFeature]:
    """Parse the document text and return its top-level feature list.

    Raises:
        MalformedDocumentError: If the text is not JSON or has no feature list.
    """
    try:
        decoded = geojson.loads(data, object_hook=dict)
    except ValueError as e:
        raise MalformedDocumentError(f"Invalid GeoJSON document: {e}") from e

    if not isinstance(decoded, dict):
        raise MalformedDocumentError("GeoJSON document must be a JSON object")
    collection = cast(GeoJSONFeatureCollection, decoded)
    features = collection.get("features")
    if not isinstance(features, list):
        raise MalformedDocumentError("FeatureCollection must contain a 'features' list")
    return features


def classify(geometry_type: Any) -> tuple[FeatureType, GeometryFactory]:
    """Map a ``geometry.type`` string to its feature type and factory."""
    try:
        return GEOMETRY_FACTORIES[GeoJSONType(geometry_type)]
    except ValueError as e:
        raise UnsupportedGeometryError(str(geometry_type)) from e


class FeatureDecoder:
    """Single-use decode pass over one GeoJSON document.

    Args:
        data: The document text.
        name_property: Property to read geometry names from.
        query: Optional filter applied to every feature.
        verbose: Log one line per accepted feature.
    """

    def __init__(
        self,
        data: str,
        name_property: str | None = None,
        query: GeoJsonQuery | None = None,
        verbose: bool = False,
    ) -> None:
        self.data = data
        self.name_property = name_property
        self.query = query
        self.verbose = verbose
        self.state = DecoderState.IDLE

    def _decode_feature(self, position: int, entry: Any) -> Feature | None:
        if not isinstance(entry, dict) or not isinstance(entry.get("geometry"), dict):
            raise MalformedDocumentError(
                f"Feature {position} must contain a 'geometry' object"
            )
        feature: GeoJSONFeature = entry  # type: ignore[assignment]
        properties = feature.get("properties") or {}
        if not isinstance(properties, dict):
            raise MalformedDocumentError(
                f"Feature {position} properties must be an object"
            )
        geometry = feature["geometry"]

        feature_type, factory = classify(geometry.get("type"))
        if not feature_type_matches(feature_type, self.query):
            return None

        decoded = Feature(
            geometry=factory(geometry.get("coordinates"), properties, self.name_property),
            properties=properties,
        )
        if not check_property(properties, self.query):
            return None
        return decoded

    def decode(self) -> Iterator[Feature]:
        """Yield the accepted features in document order.

        Raises:
            MalformedDocumentError: If the document or one of its features
                cannot be read.
            UnsupportedGeometryError: If a feature has an unknown geometry type.
            MalformedCoordinateError: If a coordinate is not numeric.
            QueryTypeMismatchError: If the query compares a non-string value.
        """
        if self.state is not DecoderState.IDLE:
            raise RuntimeError(f"Decoder cannot be restarted from state {self.state.value}")
        self.state = DecoderState.DECODING
        try:
            for position, entry in enumerate(load_features(self.data)):
                feature = self._decode_feature(position, entry)
                if feature is None:
                    continue
                if self.verbose:
                    logger.info(
                        f"{feature.type.value} {feature.name} : {feature.length} points"
                    )
                yield feature
        except Exception:
            self.state = DecoderState.FAILED
            raise
        self.state = DecoderState.FINISHED

    def run(self, send: Callable[[DecoderMessage], None]) -> None:
        """Worker entry point: send every feature, then the end marker.

        Errors are sent as a ``DecodeFailure`` instead of the end marker.
        """
        try:
            for feature in self.decode():
                send(feature)
        except Exception as e:
            send(DecodeFailure(e))
            return
        send(EndOfStream())


from geoflux.parsers.decoder import (
    DecodeFailure,
    DecoderState,
    EndOfStream,
    FeatureDecoder,
)
from geoflux.parsers.query import GeoJsonQuery, SearchType

__all__ = [
    "DecodeFailure",
    "DecoderState",
    "EndOfStream",
    "FeatureDecoder",
    "GeoJsonQuery",
    "SearchType",
]

"""Asynchronous GeoJSON decoding into typed, queryable collections."""

import asyncio
import logging
from pathlib import Path
from typing import Any, NotRequired, TypedDict, Unpack

import geojson

from geoflux.exceptions import (
    GeoJsonFileNotFoundError,
    GeoJsonFileUnreadableError,
    InvalidArgumentError,
)
from geoflux.geofence import points_in_polygon
from geoflux.models import (
    Feature,
    FeatureType,
    Geometry,
    Line,
    MultiLine,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geoflux.parsers.decoder import (
    DecodeFailure,
    DecoderMessage,
    EndOfStream,
    FeatureDecoder,
)
from geoflux.parsers.query import GeoJsonQuery
from geoflux.streams import Stream


logger = logging.getLogger(__name__)


class ParseArguments(TypedDict):
    """Optional keyword arguments shared by the parse operations."""

    name_property: NotRequired[str | None]
    verbose: NotRequired[bool]


class GeoJson:
    """Decode GeoJSON documents off the event loop and collect their features.

    Features are appended to the typed lists and pushed on the ``processed_*``
    streams as soon as the background worker decodes them. Every completed
    pass pushes ``True`` on ``end_signal``. Collections accumulate across
    passes.

    Example:
        >>> geo = GeoJson()
        >>> await geo.parse_file("cities.geojson", name_property="city")
        >>> [point.name for point in geo.points]
    """

    def __init__(self) -> None:
        self.features: list[Feature] = []
        self.points: list[Point] = []
        self.multipoints: list[MultiPoint] = []
        self.lines: list[Line] = []
        self.multilines: list[MultiLine] = []
        self.polygons: list[Polygon] = []
        self.multipolygons: list[MultiPolygon] = []

        self.processed_features: Stream[Feature] = Stream()
        self.processed_points: Stream[Point] = Stream()
        self.processed_multipoints: Stream[MultiPoint] = Stream()
        self.processed_lines: Stream[Line] = Stream()
        self.processed_multilines: Stream[MultiLine] = Stream()
        self.processed_polygons: Stream[Polygon] = Stream()
        self.processed_multipolygons: Stream[MultiPolygon] = Stream()
        self.end_signal: Stream[bool] = Stream()

        self._outputs: dict[FeatureType, tuple[list[Any], Stream[Any]]] = {
            FeatureType.POINT: (self.points, self.processed_points),
            FeatureType.MULTIPOINT: (self.multipoints, self.processed_multipoints),
            FeatureType.LINE: (self.lines, self.processed_lines),
            FeatureType.MULTILINE: (self.multilines, self.processed_multilines),
            FeatureType.POLYGON: (self.polygons, self.processed_polygons),
            FeatureType.MULTIPOLYGON: (
                self.multipolygons,
                self.processed_multipolygons,
            ),
        }
        self._lock = asyncio.Lock()

    async def parse_file(
        self,
        path: str | Path,
        *,
        query: GeoJsonQuery | None = None,
        **kwargs: Unpack[ParseArguments],
    ) -> None:
        """Parse a GeoJSON file.

        Args:
            path: Path to the UTF-8 encoded GeoJSON file.
            query: Optional filter applied while decoding.
            **kwargs: ``name_property`` and ``verbose``.

        Raises:
            GeoJsonFileNotFoundError: If the file does not exist.
            GeoJsonFileUnreadableError: If the file cannot be read.
        """
        path = Path(path)
        if not path.is_file():
            raise GeoJsonFileNotFoundError(f"The file {path} does not exist")
        try:
            data = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise GeoJsonFileUnreadableError(f"Can not read file {path}: {e}") from e

        if kwargs.get("verbose", False):
            logger.info(f"Parsing file {path}")
        await self._parse(data, query=query, **kwargs)

    async def parse(self, data: str, **kwargs: Unpack[ParseArguments]) -> None:
        """Parse a GeoJSON FeatureCollection from a string."""
        await self._parse(data, **kwargs)

    async def search_in_file(
        self,
        path: str | Path,
        *,
        query: GeoJsonQuery,
        **kwargs: Unpack[ParseArguments],
    ) -> None:
        """Parse a GeoJSON file, keeping only the features matching ``query``."""
        await self.parse_file(path, query=query, **kwargs)

    async def search(
        self,
        data: str | None = None,
        *,
        query: GeoJsonQuery,
        **kwargs: Unpack[ParseArguments],
    ) -> None:
        """Parse a GeoJSON string, keeping only the features matching ``query``.

        Without ``data`` nothing is decoded and the already collected features
        are left untouched.

        Raises:
            InvalidArgumentError: If no data is given and nothing was parsed yet.
        """
        if data is None and not self.features:
            raise InvalidArgumentError("Provide data or parse some to run a search")
        if data is not None:
            await self._parse(data, query=query, **kwargs)

    async def geofence(self, polygon: Polygon, points: list[Point]) -> list[Point]:
        """Find the points located inside a polygon.

        A point is returned once per ring of the polygon that contains it.
        """
        return points_in_polygon(polygon, points)

    def to_feature_collection(self) -> geojson.FeatureCollection:
        """Export every collected feature as a GeoJSON FeatureCollection."""
        return geojson.FeatureCollection(
            [feature.__geo_interface__ for feature in self.features]
        )

    def dispose(self) -> None:
        """Close every stream. Only call it once parsing is finished."""
        self.processed_features.close()
        for _, stream in self._outputs.values():
            stream.close()
        self.end_signal.close()

    def _collect(self, feature: Feature) -> None:
        collection, stream = self._outputs[feature.type]
        geometry: Geometry = feature.geometry
        collection.append(geometry)
        stream.add(geometry)
        self.features.append(feature)
        self.processed_features.add(feature)

    async def _parse(
        self,
        data: str,
        *,
        query: GeoJsonQuery | None = None,
        name_property: str | None = None,
        verbose: bool = False,
    ) -> None:
        decoder = FeatureDecoder(
            data, name_property=name_property, query=query, verbose=verbose
        )
        async with self._lock:
            loop = asyncio.get_running_loop()
            channel: asyncio.Queue[DecoderMessage] = asyncio.Queue()

            def send(message: DecoderMessage) -> None:
                loop.call_soon_threadsafe(channel.put_nowait, message)

            worker = loop.run_in_executor(None, decoder.run, send)
            try:
                while True:
                    message = await channel.get()
                    if isinstance(message, EndOfStream):
                        break
                    if isinstance(message, DecodeFailure):
                        logger.error(
                            f"Decoding failed: {message.error!r} "
                            f"({type(message.error).__name__})"
                        )
                        raise message.error
                    self._collect(message)
            finally:
                await worker

        self.end_signal.add(True)

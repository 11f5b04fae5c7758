"""Point-in-polygon tests for decoded points."""

import logging

import numpy as np
import shapely

from geoflux.models import GeoSerie, Point, Polygon


logger = logging.getLogger(__name__)


def points_in_ring(geo_serie: GeoSerie, points: list[Point]) -> np.ndarray:
    """Test which points fall inside a single ring.

    Points on the ring boundary are not inside. Rings with fewer than three
    coordinates enclose no area and contain nothing.

    Args:
        geo_serie: The ring to test against.
        points: The points to test.

    Returns:
        Boolean mask of shape (N,) where True = inside the ring.
    """
    if len(geo_serie) < 3 or not points:
        return np.zeros(len(points), dtype=bool)

    ring = shapely.Polygon(geo_serie.coordinates)
    longitudes = np.array([point.geo_point.longitude for point in points])
    latitudes = np.array([point.geo_point.latitude for point in points])
    return shapely.contains_xy(ring, longitudes, latitudes)


def points_in_polygon(polygon: Polygon, points: list[Point]) -> list[Point]:
    """Find the points located inside any ring of a polygon.

    A point is returned once for every ring that contains it, so a point
    inside both the outer ring and a hole appears twice.

    Args:
        polygon: The fence.
        points: Candidate points.

    Returns:
        The matching points, grouped by point in input order.
    """
    masks = [points_in_ring(geo_serie, points) for geo_serie in polygon.geo_series]

    geofenced = []
    for i, point in enumerate(points):
        for mask in masks:
            if mask[i]:
                geofenced.append(point)

    logger.debug(
        f"{len(geofenced)} of {len(points)} points inside polygon {polygon.name}"
    )
    return geofenced

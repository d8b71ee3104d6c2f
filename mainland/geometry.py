"""
Point-in-polygon predicate.

Containment is edge inclusive: a point lying exactly on an outer ring or a
hole ring counts as contained (shapely ``covers``). A point inside a hole
is not contained.
"""

from typing import Callable

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry.base import BaseGeometry

from .coordinates import is_valid_point
from .schemas import Point

# Signature shared by every containment predicate the classifier accepts
Predicate = Callable[[Point, BaseGeometry], bool]


def contains(point: Point, geometry: BaseGeometry) -> bool:
    """
    Test whether a (latitude, longitude) point lies in a polygon or multipolygon.

    Args:
        point: (latitude, longitude) tuple
        geometry: Shapely Polygon or MultiPolygon in (lon, lat) order

    Returns:
        True if the point is covered by the geometry. Always False for
        NaN or infinite coordinates.
    """
    if not is_valid_point(point):
        return False

    lat, lon = point
    return bool(geometry.covers(ShapelyPoint(lon, lat)))

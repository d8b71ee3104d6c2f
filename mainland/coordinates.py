"""
Coordinate string parsing.

Boundary coordinates arrive as "lon lat" pairs joined by ':'. Points are
returned as (latitude, longitude), the order map overlays expect.
"""

import logging
import math
from typing import List

from .schemas import Point

logger = logging.getLogger(__name__)

NAN = float('nan')


def _to_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        return NAN


def parse_coordinates(
    raw: str,
    pair_delimiter: str = ':',
    value_delimiter: str = ' ',
) -> List[Point]:
    """
    Parse a raw coordinate string into a list of points.

    Args:
        raw: String of the form "lon1 lat1:lon2 lat2:..."
        pair_delimiter: Separator between pairs
        value_delimiter: Separator between longitude and latitude

    Returns:
        List of (latitude, longitude) tuples. Unparseable components are NaN.
    """
    if not raw or not raw.strip():
        return []

    points = []
    for pair in raw.split(pair_delimiter):
        pair = pair.strip()
        if not pair:
            continue

        tokens = [t for t in pair.split(value_delimiter) if t]
        lon = _to_float(tokens[0]) if len(tokens) > 0 else NAN
        lat = _to_float(tokens[1]) if len(tokens) > 1 else NAN

        point = (lat, lon)
        if not is_valid_point(point):
            logger.warning("Invalid coordinate pair %r", pair)
        points.append(point)

    return points


def is_valid_point(point: Point) -> bool:
    """Return True if both coordinates are finite."""
    lat, lon = point
    return math.isfinite(lat) and math.isfinite(lon)

# map/master_code/corridor/arcs.py
# Quadratic Bezier arcs between two (lat, lon) points, bowed perpendicular to the chord.

import logging
import math
from enum import Enum
from typing import List, Tuple

import numpy as np

LatLon = Tuple[float, float]

SEGMENTS = 20
DEFAULT_ARC_HEIGHT = 0.02

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


def _perpendicular(start: LatLon, end: LatLon, direction: Direction):
    """Unit normal to the chord as (lat, lon) components, or None for a zero-length chord."""
    dx = end[1] - start[1]   # Δlon
    dy = end[0] - start[0]   # Δlat
    length = math.hypot(dx, dy)
    if length == 0:
        return None
    if direction is Direction.UP:
        return -dx / length, dy / length
    return dx / length, -dy / length


def generate_arc(start: LatLon, end: LatLon,
                 arc_height: float = DEFAULT_ARC_HEIGHT,
                 direction: Direction = Direction.UP) -> List[LatLon]:
    """Return SEGMENTS+1 points along the arc from start to end.

    arc_height is in degrees; a negative value bows the curve to the other side.
    Coincident endpoints give the two-point path [start, end].
    """
    direction = Direction(direction)
    start = (float(start[0]), float(start[1]))
    end = (float(end[0]), float(end[1]))

    perp = _perpendicular(start, end, direction)
    if perp is None:
        logger.warning("Zero-length chord at %s; drawing a straight leg", start)
        return [start, end]

    ctrl_lat = (start[0] + end[0]) / 2 + perp[0] * arc_height
    ctrl_lon = (start[1] + end[1]) / 2 + perp[1] * arc_height

    t = np.arange(SEGMENTS + 1) / SEGMENTS
    a, b, c = (1 - t) ** 2, 2 * (1 - t) * t, t ** 2
    lats = a * start[0] + b * ctrl_lat + c * end[0]
    lons = a * start[1] + b * ctrl_lon + c * end[1]
    return list(zip(lats.tolist(), lons.tolist()))


def chord_offset(point: LatLon, start: LatLon, end: LatLon) -> float:
    """Signed distance (degrees) of point from the start→end chord; positive on the UP side.

    A zero-length chord has no side, so the unsigned distance to start is returned instead.
    """
    perp = _perpendicular(start, end, Direction.UP)
    if perp is None:
        return math.hypot(point[0] - start[0], point[1] - start[1])
    return (point[0] - start[0]) * perp[0] + (point[1] - start[1]) * perp[1]


def max_bow(path: List[LatLon]) -> float:
    """Largest |offset| of any point of path from the chord joining its endpoints."""
    if len(path) < 3:
        return 0.0
    start, end = path[0], path[-1]
    return max(abs(chord_offset(p, start, end)) for p in path)

from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


class Orientation(Enum):
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


def as_point(p):
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x, y)


def orientation(p, q, r):
    """
    Finds the orientation of an ordered triplet (p, q, r).

    The sign of (qy - py) * (rx - qx) - (qx - px) * (ry - qy) decides it:
        > 0: CLOCKWISE (r is to the right of vector pq)
        < 0: COUNTER_CLOCKWISE (r is to the left of vector pq)
        = 0: COLLINEAR
    Zero is tested exactly, so only integer or Fraction coordinates are
    classified without rounding error.
    """
    px, py, qx, qy, rx, ry = *p, *q, *r
    val = (qy - py) * (rx - qx) - (qx - px) * (ry - qy)
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTER_CLOCKWISE


def distance_sq(p1, p2):
    """Square of the distance between two points (no sqrt, stays exact)."""
    x1, y1, x2, y2 = *p1, *p2
    return (x2 - x1) ** 2 + (y2 - y1) ** 2

"""Hull assertions shared across test modules."""

from convex_hull.geometry import Orientation, orientation


def assert_convex_ccw(hull):
    """Every consecutive triple, wrapping around, turns left."""
    n = len(hull)
    for i in range(n):
        turn = orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n])
        assert turn is Orientation.COUNTER_CLOCKWISE, (hull[i], hull[(i + 1) % n], hull[(i + 2) % n])


def assert_contains(hull, points):
    """No point lies strictly to the right of any hull edge."""
    n = len(hull)
    for p in points:
        for i in range(n):
            assert orientation(hull[i], hull[(i + 1) % n], p) is not Orientation.CLOCKWISE, (p, hull[i])

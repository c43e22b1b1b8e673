import logging
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from convex_hull.errors import InsufficientPointsError, InvalidInputError, ScanAborted
from convex_hull.geometry import Orientation, Point, as_point, distance_sq, orientation

logger = logging.getLogger(__name__)

# Better than Jarvis in terms of complexity: O(n log n), dominated by the sort.


class Phase(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class StepAction(str, Enum):
    START = "start"  # stack seeded with the first three points
    POP = "pop"
    PUSH = "push"
    DONE = "done"


class ScanStep(NamedTuple):
    """One snapshot of the scan, handed to whoever renders or paces it."""

    action: StepAction
    phase: Phase
    stack: Tuple[Point, ...]
    candidate: Optional[Point]
    all_points: Tuple[Point, ...]
    status: str


# observer(stack, all_points, phase) -> truthy to cancel the scan
StepObserver = Callable[[List[Point], List[Point], Phase], Optional[bool]]


def select_pivot(points):
    """
    Moves the bottom-most point (left-most on a tie) to index 0 and
    returns it.
    """
    if not points:
        raise InvalidInputError("Convex hull needs at least one point")

    low = 0
    for i in range(1, len(points)):
        x, y = points[i]
        if y < points[low][1] or (y == points[low][1] and x < points[low][0]):
            low = i

    points[0], points[low] = points[low], points[0]
    return points[0]


def polar_order_key(pivot):
    """
    Sort key ordering points by polar angle counter-clockwise around
    ``pivot``. Points on the same ray sort nearest first, so the farthest
    one of a collinear run ends up last.
    """

    def compare(p1, p2):
        o = orientation(pivot, p1, p2)
        if o is Orientation.COLLINEAR:
            return -1 if distance_sq(pivot, p2) >= distance_sq(pivot, p1) else 1
        return -1 if o is Orientation.COUNTER_CLOCKWISE else 1

    return cmp_to_key(compare)


def sort_by_polar_angle(points):
    """Sorts points[1:] in place around the pivot at points[0]."""
    points[1:] = sorted(points[1:], key=polar_order_key(points[0]))


def filter_collinear(points):
    """
    Collapses every run of points sharing a polar angle with the pivot to
    its last (farthest) member. Expects a list already sorted by
    ``sort_by_polar_angle``; truncates it in place and returns its new
    length.
    """
    pivot = points[0]
    n = len(points)
    m = 1
    i = 1
    while i < n:
        # keep skipping i while i and i+1 make the same angle with the pivot
        while i < n - 1 and orientation(pivot, points[i], points[i + 1]) is Orientation.COLLINEAR:
            i += 1
        points[m] = points[i]
        m += 1
        i += 1
    del points[m:]

    if m < 3:
        logger.warning("Only %d distinct-angle points out of %d, no hull", m, n)
        raise InsufficientPointsError(points)
    return m


def graham_scan_trace(points) -> Iterator[ScanStep]:
    """
    Computes the convex hull with the Graham scan and yields the stack
    after every step, for animation.

    Pivot selection, sorting and filtering run eagerly, so
    InvalidInputError and InsufficientPointsError surface from this call
    rather than from the first ``next()``. ``points`` is reordered and
    truncated in place; copy it first if the input order matters.

    The last step has phase CLOSED and its stack is the hull,
    counter-clockwise from the pivot. Closing the generator early
    abandons the scan.
    """
    all_points = tuple(as_point(p) for p in points)
    points[:] = all_points

    pivot = select_pivot(points)
    logger.debug("Pivot %s chosen from %d points", pivot, len(points))
    sort_by_polar_angle(points)
    filter_collinear(points)
    logger.debug("%d points left after collinearity filter", len(points))

    return _scan(list(points), all_points)


def _scan(points, all_points):
    stack = points[:3]
    yield ScanStep(
        StepAction.START, Phase.OPEN, tuple(stack), None, all_points,
        f"Stack seeded with pivot {stack[0]}, {stack[1]} and {stack[2]}",
    )

    for p in points[3:]:
        # next-to-top, top, p must make a left turn; anything else
        # (clockwise or collinear) means top is not on the hull
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], p) is not Orientation.COUNTER_CLOCKWISE:
            top = stack.pop()
            yield ScanStep(
                StepAction.POP, Phase.OPEN, tuple(stack), p, all_points,
                f"Popped {top}: no left turn towards {p}",
            )
        stack.append(p)
        yield ScanStep(
            StepAction.PUSH, Phase.OPEN, tuple(stack), p, all_points,
            f"Pushed {p}",
        )

    yield ScanStep(
        StepAction.DONE, Phase.CLOSED, tuple(stack), None, all_points,
        f"Hull complete! Found {len(stack)} points.",
    )


def graham_scan(points, observer: Optional[StepObserver] = None) -> List[Point]:
    """
    Returns the convex hull of ``points`` counter-clockwise, starting at
    the bottom-most (then left-most) point.

    ``observer`` is called as ``observer(stack, all_points, phase)`` for
    every step of the scan. A truthy return while the phase is still OPEN
    cancels the scan and raises ScanAborted.
    """
    trace = graham_scan_trace(points)
    steps = 0
    hull = []
    for step in trace:
        steps += 1
        hull = step.stack
        if observer is None:
            continue
        stop = observer(list(step.stack), list(step.all_points), step.phase)
        if stop and step.phase is Phase.OPEN:
            trace.close()
            logger.info("Scan cancelled by observer after %d steps", steps)
            raise ScanAborted(step.stack, steps)

    logger.debug("Hull has %d vertices", len(hull))
    return list(hull)

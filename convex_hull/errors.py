"""Exceptions raised by the convex_hull package."""


class HullError(Exception):
    """Base class for every hull computation failure."""


class InvalidInputError(HullError, ValueError):
    """No points were supplied, or a coordinate could not be parsed."""


class InsufficientPointsError(HullError):
    """Fewer than three points with distinct polar angles remain.

    Covers the all-collinear and all-duplicate cases. ``points`` holds the
    survivors of the collinearity filter, pivot first.
    """

    def __init__(self, points):
        self.points = list(points)
        super().__init__(
            f"Convex hull needs 3 non-collinear points, got {len(self.points)} "
            "after removing collinear points"
        )


class ScanAborted(HullError):
    """The scan was cancelled by its observer before completing.

    ``stack`` is the last stack snapshot and is not guaranteed convex.
    """

    def __init__(self, stack, steps):
        self.stack = list(stack)
        self.steps = steps
        super().__init__(f"Scan aborted after {steps} steps")

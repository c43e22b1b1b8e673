from convex_hull.errors import HullError, InsufficientPointsError, InvalidInputError, ScanAborted
from convex_hull.geometry import Orientation, Point, distance_sq, orientation
from convex_hull.graham_scan import (
    Phase,
    ScanStep,
    StepAction,
    filter_collinear,
    graham_scan,
    graham_scan_trace,
    polar_order_key,
    select_pivot,
    sort_by_polar_angle,
)

__all__ = [
    "HullError",
    "InsufficientPointsError",
    "InvalidInputError",
    "Orientation",
    "Phase",
    "Point",
    "ScanAborted",
    "ScanStep",
    "StepAction",
    "distance_sq",
    "filter_collinear",
    "graham_scan",
    "graham_scan_trace",
    "orientation",
    "polar_order_key",
    "select_pivot",
    "sort_by_polar_angle",
]

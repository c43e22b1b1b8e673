"""Command line driver: read points, print their convex hull."""

import argparse
import logging
import sys
import time

from convex_hull.config import get_settings
from convex_hull.errors import InsufficientPointsError, InvalidInputError, ScanAborted
from convex_hull.graham_scan import Phase, graham_scan
from convex_hull.points_io import parse_point, read_points

logger = logging.getLogger(__name__)

EXIT_INSUFFICIENT = 1
EXIT_ABORTED = 3


def format_point(p):
    return f"{p[0]},{p[1]}"


def format_stack(stack):
    return " -> ".join(f"({format_point(p)})" for p in stack)


def build_parser(settings):
    ap = argparse.ArgumentParser(
        prog="convex-hull",
        description="Compute the convex hull of 2D points with the Graham scan.",
    )
    ap.add_argument("points", nargs="*", help="Points as 'x,y'.")
    ap.add_argument("-f", "--file", help="Read points from a file ('-' for stdin).")
    ap.add_argument("--trace", action="store_true", help="Print the stack after every scan step.")
    ap.add_argument("--delay", type=int, default=settings.step_delay_ms,
                    help="Milliseconds to pause between traced steps.")
    ap.add_argument("--max-steps", type=int, default=None,
                    help="Cancel the scan after this many steps.")
    ap.add_argument("--exact", action="store_true", default=settings.exact_coordinates,
                    help="Parse decimal coordinates as exact fractions.")
    ap.add_argument("--log-level", default=settings.log_level)
    return ap


def load_points(args):
    points = [parse_point(text, args.exact) for text in args.points]
    if args.file == "-":
        points.extend(read_points(sys.stdin, args.exact))
    elif args.file:
        with open(args.file) as f:
            points.extend(read_points(f, args.exact))
    return points


def make_observer(trace, delay_ms, max_steps):
    steps = 0

    def observer(stack, all_points, phase):
        nonlocal steps
        steps += 1
        if trace:
            print(f"[{phase.value}] step {steps}: {format_stack(stack)}")
            if phase is Phase.OPEN and delay_ms:
                time.sleep(delay_ms / 1000)
        return max_steps is not None and steps >= max_steps

    return observer


def main(argv=None):
    settings = get_settings()
    ap = build_parser(settings)
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        points = load_points(args)
    except (InvalidInputError, OSError) as e:
        ap.error(str(e))

    if args.trace or args.max_steps is not None:
        observer = make_observer(args.trace, args.delay, args.max_steps)
    else:
        observer = None

    try:
        hull = graham_scan(points, observer)
    except InvalidInputError as e:
        ap.error(str(e))
    except InsufficientPointsError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INSUFFICIENT
    except ScanAborted as e:
        print(f"aborted: {e}", file=sys.stderr)
        return EXIT_ABORTED

    print("Convex Hull:")
    for p in hull:
        print(format_point(p))
    return 0

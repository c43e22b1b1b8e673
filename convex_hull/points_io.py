"""Reading point sets from text: one ``x,y`` or ``x y`` pair per line."""

import logging
import math
from fractions import Fraction

from convex_hull.errors import InvalidInputError
from convex_hull.geometry import Point

logger = logging.getLogger(__name__)


def parse_coordinate(text, exact=False):
    """Integers stay int; anything else becomes float, or Fraction if exact."""
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = Fraction(text) if exact else float(text)
    except (ValueError, ZeroDivisionError) as e:
        raise InvalidInputError(f"Not a coordinate: {text!r}") from e
    if not exact and not math.isfinite(value):
        raise InvalidInputError(f"Coordinate must be finite: {text!r}")
    return value


def parse_point(text, exact=False):
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise InvalidInputError(f"Expected 'x,y' or 'x y', got {text!r}")
    x, y = parts
    return Point(parse_coordinate(x, exact), parse_coordinate(y, exact))


def read_points(stream, exact=False):
    """
    Reads points from a text stream. Blank lines and ``#`` comments are
    skipped. A first line holding a single integer is taken as the point
    count and checked against what follows.
    """
    points = []
    expected = None
    for lineno, raw in enumerate(stream, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        if expected is None and not points and len(line.replace(",", " ").split()) == 1:
            try:
                expected = int(line)
            except ValueError as e:
                raise InvalidInputError(f"Line {lineno}: bad point count {line!r}") from e
            continue
        try:
            points.append(parse_point(line, exact))
        except InvalidInputError as e:
            raise InvalidInputError(f"Line {lineno}: {e}") from e

    if expected is not None and expected != len(points):
        raise InvalidInputError(f"Header says {expected} points, read {len(points)}")
    logger.debug("Read %d points", len(points))
    return points

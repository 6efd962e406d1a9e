"""
geometry.py

Value types and small coordinate helpers shared by the ruler and the
vectorized functions. Coordinates are always (x=longitude, y=latitude) in
degrees.

Public names:
- `Point(x, y)`, `BBox(west, south, east, north)`, `PointOnLine(point, index, t)`
- `as_point(p)`, `as_bbox(bbox)`, `as_line(line, min_points)`
- `interpolate(a, b, t)`, `equals(a, b)`

"""
from typing import List, NamedTuple, Sequence

from cheap_ruler.exceptions import InvalidGeometry


class Point(NamedTuple):
    x: float
    y: float


class BBox(NamedTuple):
    west: float
    south: float
    east: float
    north: float


class PointOnLine(NamedTuple):
    """Closest point on a line to a query point.

    `index` is the start vertex of the segment holding `point`; `t` is the
    unclamped projection parameter along that segment.
    """
    point: Point
    index: int
    t: float


def as_point(p) -> Point:
    """Coerce a 2-element sequence into a `Point`."""
    if isinstance(p, Point):
        return p
    try:
        x, y = p
    except (TypeError, ValueError):
        raise InvalidGeometry(f"expected a 2-element coordinate, got {p!r}") from None
    return Point(float(x), float(y))


def as_bbox(bbox) -> BBox:
    if isinstance(bbox, BBox):
        return bbox
    try:
        w, s, e, n = bbox
    except (TypeError, ValueError):
        raise InvalidGeometry(f"expected [west, south, east, north], got {bbox!r}") from None
    return BBox(float(w), float(s), float(e), float(n))


def as_line(line: Sequence, min_points: int = 0) -> List[Point]:
    """Coerce a sequence of coordinates into a list of `Point`.

    Raises `InvalidGeometry` when the line has fewer than `min_points` points.
    """
    pts = [as_point(p) for p in line]
    if len(pts) < min_points:
        raise InvalidGeometry(f"line needs at least {min_points} point(s), got {len(pts)}")
    return pts


def interpolate(a: Point, b: Point, t: float) -> Point:
    """Linear interpolation from `a` towards `b` by fraction `t`."""
    dx = b.x - a.x
    dy = b.y - a.y
    return Point(a.x + dx * t, a.y + dy * t)


def equals(a: Point, b: Point) -> bool:
    return a.x == b.x and a.y == b.y

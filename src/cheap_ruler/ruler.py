"""
ruler.py

Planar approximation of geodesic measurements around a reference latitude.

A `Ruler` holds two scale factors, `kx` and `ky`, converting degrees of
longitude and latitude into the chosen distance unit at that latitude.
Within a few hundred kilometers of the reference latitude (and away from the
poles) the area is treated as flat, which makes every operation a handful of
multiplications instead of trigonometric series per call.

Public API:
- `create(latitude, units='kilometers')` -> Ruler
- `create_from_tile(y, z, units='kilometers')` -> Ruler
- `Ruler` methods: distance, bearing, destination, offset, line_distance,
  area, along, point_on_line, line_slice, line_slice_along, buffer_point,
  buffer_bbox, inside_bbox

Points are (longitude, latitude) pairs. Any 2-element sequence is accepted
and results are returned as `Point` / `BBox` named tuples.

"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
import logging
import math

from cheap_ruler.config import DEFAULT_UNITS, KX_COEFFICIENTS, KY_COEFFICIENTS, UNIT_FACTORS
from cheap_ruler.exceptions import InvalidUnit
from cheap_ruler.geometry import (
    BBox,
    Point,
    PointOnLine,
    as_bbox,
    as_line,
    as_point,
    equals,
    interpolate,
)
from cheap_ruler.tiles import tile_to_latitude

logger = logging.getLogger(__name__)


def unit_multiplier(units) -> float:
    """Return the multiplier (relative to kilometers) for `units`.

    None or an empty string select `DEFAULT_UNITS`. Unknown names raise
    `InvalidUnit`.
    """
    if not units:
        units = DEFAULT_UNITS
    try:
        return UNIT_FACTORS[units]
    except (KeyError, TypeError):
        logger.debug('rejected unit %r', units)
        raise InvalidUnit(units, UNIT_FACTORS) from None


def scale_factors(latitude: float, multiplier: float = 1.0) -> Tuple[float, float]:
    """Compute (kx, ky) for `latitude` in degrees.

    cos(2..5 * lat) come from the Chebyshev recurrence
    cos_n = 2 cos cos_(n-1) - cos_(n-2), so only one trig call is needed.
    """
    cos = math.cos(latitude * math.pi / 180)
    cos2 = 2 * cos * cos - 1
    cos3 = 2 * cos * cos2 - cos
    cos4 = 2 * cos * cos3 - cos2
    cos5 = 2 * cos * cos4 - cos3

    kx = multiplier * (KX_COEFFICIENTS['cos1'] * cos
                       + KX_COEFFICIENTS['cos3'] * cos3
                       + KX_COEFFICIENTS['cos5'] * cos5)
    ky = multiplier * (KY_COEFFICIENTS['cos0']
                       + KY_COEFFICIENTS['cos2'] * cos2
                       + KY_COEFFICIENTS['cos4'] * cos4)
    return kx, ky


def create(latitude: float, units: str = DEFAULT_UNITS) -> 'Ruler':
    """Build a ruler for measurements around `latitude` (degrees) in `units`.

    Latitude is not validated; results near the poles are meaningless.
    """
    m = unit_multiplier(units)
    kx, ky = scale_factors(latitude, m)
    logger.debug('ruler lat=%.6f units=%s kx=%.9f ky=%.9f', latitude, units or DEFAULT_UNITS, kx, ky)
    return Ruler(kx, ky, units or DEFAULT_UNITS)


def create_from_tile(y: float, z: float, units: str = DEFAULT_UNITS) -> 'Ruler':
    """Build a ruler for the latitude at the center of Web-Mercator tile row `y`, zoom `z`."""
    return create(tile_to_latitude(y, z), units)


@dataclass(frozen=True)
class Ruler:
    """Immutable pair of scale factors for a reference latitude.

    Attributes:
        kx: distance units per degree of longitude
        ky: distance units per degree of latitude
        units: unit name the factors were derived for (not part of equality)
    """

    kx: float
    ky: float
    units: str = field(default=DEFAULT_UNITS, compare=False)

    @classmethod
    def from_tile(cls, y: float, z: float, units: str = DEFAULT_UNITS) -> 'Ruler':
        return create_from_tile(y, z, units)

    # ------------------------------------------------------------------
    # points
    # ------------------------------------------------------------------
    def distance(self, a, b) -> float:
        """Distance between two points in ruler units."""
        a = as_point(a)
        b = as_point(b)
        dx = (a.x - b.x) * self.kx
        dy = (a.y - b.y) * self.ky
        return math.sqrt(dx * dx + dy * dy)

    def bearing(self, a, b) -> float:
        """Bearing from `a` to `b` in degrees, 0 = north, range (-180, 180].

        Returns 0 when the points coincide.
        """
        a = as_point(a)
        b = as_point(b)
        dx = (b.x - a.x) * self.kx
        dy = (b.y - a.y) * self.ky
        if dx == 0.0 and dy == 0.0:
            return 0.0
        bearing = math.atan2(dx, dy) * 180 / math.pi
        if bearing > 180:
            bearing -= 360
        return bearing

    def destination(self, p, dist: float, bearing: float) -> Point:
        """Point at `dist` ruler units from `p` along `bearing` degrees."""
        a = (90.0 - bearing) * math.pi / 180.0
        return self.offset(p, math.cos(a) * dist, math.sin(a) * dist)

    def offset(self, p, dx: float, dy: float) -> Point:
        """Shift `p` by planar offsets `dx` (east) and `dy` (north) in ruler units."""
        p = as_point(p)
        return Point(p.x + dx / self.kx, p.y + dy / self.ky)

    # ------------------------------------------------------------------
    # lines and polygons
    # ------------------------------------------------------------------
    def line_distance(self, points: Sequence) -> float:
        pts = as_line(points)
        total = 0.0
        for i in range(len(pts) - 1):
            total += self.distance(pts[i], pts[i + 1])
        return total

    def area(self, polygon: Sequence) -> float:
        """Area of a polygon (outer ring followed by holes) in squared ruler units.

        Rings do not need a closing point. Holes are subtracted, so they are
        expected to wind the same way as the outer ring.
        """
        total = 0.0
        for i, ring in enumerate(polygon):
            pts = as_line(ring)
            sign = 1.0 if i == 0 else -1.0
            k = len(pts) - 1
            for j in range(len(pts)):
                total += (pts[j].x - pts[k].x) * (pts[j].y + pts[k].y) * sign
                k = j
        return (abs(total) / 2) * self.kx * self.ky

    def along(self, line: Sequence, dist: float) -> Point:
        """Point at `dist` ruler units along `line`.

        Clamps to the first point for `dist <= 0` and to the last point past
        the end of the line.
        """
        pts = as_line(line, min_points=1)
        if dist <= 0:
            return pts[0]

        total = 0.0
        for i in range(len(pts) - 1):
            p0 = pts[i]
            p1 = pts[i + 1]
            d = self.distance(p0, p1)
            total += d
            if total > dist:
                return interpolate(p0, p1, (dist - (total - d)) / d)

        return pts[-1]

    def point_on_line(self, line: Sequence, p) -> PointOnLine:
        """Closest point on `line` to `p`, with its segment index and projection parameter."""
        pts = as_line(line, min_points=2)
        p = as_point(p)
        kx, ky = self.kx, self.ky

        min_dist = math.inf
        min_point = pts[0]
        min_i = 0
        min_t = 0.0

        for i in range(len(pts) - 1):
            x, y = pts[i]
            dx = (pts[i + 1].x - x) * kx
            dy = (pts[i + 1].y - y) * ky
            t = 0.0

            if dx != 0 or dy != 0:
                t = ((p.x - x) * kx * dx + (p.y - y) * ky * dy) / (dx * dx + dy * dy)
                if t > 1:
                    x, y = pts[i + 1]
                elif t > 0:
                    x += (dx / kx) * t
                    y += (dy / ky) * t

            dx = (p.x - x) * kx
            dy = (p.y - y) * ky
            sq_dist = dx * dx + dy * dy
            if sq_dist < min_dist:
                min_dist = sq_dist
                min_point = Point(x, y)
                min_i = i
                min_t = t

        return PointOnLine(min_point, min_i, min_t)

    def line_slice(self, start, stop, line: Sequence) -> List[Point]:
        """Part of `line` between the projections of `start` and `stop`.

        The slice always runs in the direction of the line, whatever the
        order of `start` and `stop`.
        """
        pts = as_line(line, min_points=2)
        p1 = self.point_on_line(pts, start)
        p2 = self.point_on_line(pts, stop)

        if p1.index > p2.index or (p1.index == p2.index and p1.t > p2.t):
            p1, p2 = p2, p1

        sl = [p1.point]

        l = p1.index + 1
        r = p2.index

        if not equals(pts[l], sl[0]) and l <= r:
            sl.append(pts[l])

        for i in range(l + 1, r + 1):
            sl.append(pts[i])

        if not equals(pts[r], p2.point):
            sl.append(p2.point)

        return sl

    def line_slice_along(self, start: float, stop: float, line: Sequence) -> List[Point]:
        """Part of `line` between distances `start` and `stop` along it.

        Returns an empty list when `start` is past the end of the line, or at
        the end with `stop` beyond it. When `start == stop` equals the line
        length the result is the single end point.
        """
        pts = as_line(line)
        total = 0.0
        sl: List[Point] = []

        for i in range(len(pts) - 1):
            p0 = pts[i]
            p1 = pts[i + 1]
            d = self.distance(p0, p1)
            total += d

            if total > start and not sl:
                sl.append(interpolate(p0, p1, _fraction(start - (total - d), d)))

            if total >= stop:
                sl.append(interpolate(p0, p1, _fraction(stop - (total - d), d)))
                return sl

            if total > start:
                sl.append(p1)

        return sl

    # ------------------------------------------------------------------
    # bounding boxes
    # ------------------------------------------------------------------
    def buffer_point(self, p, buffer: float) -> BBox:
        """Square bbox reaching `buffer` ruler units around `p`."""
        p = as_point(p)
        v = buffer / self.ky
        h = buffer / self.kx
        return BBox(p.x - h, p.y - v, p.x + h, p.y + v)

    def buffer_bbox(self, bbox, buffer: float) -> BBox:
        """Expand `bbox` by `buffer` ruler units on every side."""
        bbox = as_bbox(bbox)
        v = buffer / self.ky
        h = buffer / self.kx
        return BBox(bbox.west - h, bbox.south - v, bbox.east + h, bbox.north + v)

    def inside_bbox(self, p, bbox) -> bool:
        p = as_point(p)
        bbox = as_bbox(bbox)
        return (bbox.west <= p.x <= bbox.east and
                bbox.south <= p.y <= bbox.north)


def _fraction(part: float, d: float) -> float:
    # zero-length segment: stay on its start vertex
    if d == 0:
        return 0.0
    return part / d

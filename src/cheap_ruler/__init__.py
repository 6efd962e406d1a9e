"""Fast approximate geodesic measurements for city-scale extents."""

from cheap_ruler.config import UNIT_FACTORS
from cheap_ruler.exceptions import InvalidGeometry, InvalidUnit
from cheap_ruler.geometry import BBox, Point, PointOnLine
from cheap_ruler.ruler import Ruler, create, create_from_tile

__all__ = [
    "UNIT_FACTORS",
    "InvalidGeometry",
    "InvalidUnit",
    "BBox",
    "Point",
    "PointOnLine",
    "Ruler",
    "create",
    "create_from_tile",
]

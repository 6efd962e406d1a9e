"""Web-Mercator tile helpers."""

import math


def tile_to_latitude(y: float, z: float) -> float:
    """Return the latitude (degrees) at the vertical center of tile row `y` at zoom `z`."""
    n = math.pi * (1 - 2 * (y + 0.5) / 2 ** z)
    return math.atan(math.sinh(n)) * 180 / math.pi

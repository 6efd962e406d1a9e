"""
vectorized.py

numpy batch versions of the per-point ruler operations, for measuring many
coordinates at once (tracks, point clouds, candidate sets).

All functions take a `Ruler` and array-like N x 2 coordinates (x=lon, y=lat).
A single 2-element coordinate broadcasts against an N x 2 array. Results
agree with the scalar `Ruler` methods element by element.
"""
from typing import Any
import numpy as np

from cheap_ruler.exceptions import InvalidGeometry
from cheap_ruler.geometry import as_bbox


def as_coords(points: Any) -> np.ndarray:
    """Return `points` as a float array whose last axis has length 2."""
    arr = np.asarray(points, dtype=float)
    if arr.ndim not in (1, 2) or arr.shape[-1] != 2:
        raise InvalidGeometry(f"expected coordinates of shape (2,) or (N, 2), got {arr.shape}")
    return arr


def distances(ruler, a, b) -> np.ndarray:
    """Distances between paired points of `a` and `b` in ruler units."""
    a_arr = as_coords(a)
    b_arr = as_coords(b)
    dx = (a_arr[..., 0] - b_arr[..., 0]) * ruler.kx
    dy = (a_arr[..., 1] - b_arr[..., 1]) * ruler.ky
    return np.sqrt(dx * dx + dy * dy)


def bearings(ruler, a, b) -> np.ndarray:
    """Bearings from `a` to `b` in degrees, 0 = north, range (-180, 180]."""
    a_arr = as_coords(a)
    b_arr = as_coords(b)
    dx = (b_arr[..., 0] - a_arr[..., 0]) * ruler.kx
    dy = (b_arr[..., 1] - a_arr[..., 1]) * ruler.ky
    out = np.arctan2(dx, dy) * 180 / np.pi
    out = np.where(out > 180, out - 360, out)
    # coincident points have no direction
    return np.where((dx == 0.0) & (dy == 0.0), 0.0, out)


def cumulative_distances(ruler, line) -> np.ndarray:
    """Running length along `line`; element i is the distance from the start to vertex i."""
    pts = as_coords(line)
    if pts.ndim != 2 or pts.shape[0] == 0:
        raise InvalidGeometry("line needs at least 1 point")
    seg = distances(ruler, pts[:-1], pts[1:])
    return np.concatenate([[0.0], np.cumsum(seg)])


def inside_bbox_mask(points, bbox) -> np.ndarray:
    """Boolean mask of `points` lying inside `bbox` (edges inclusive)."""
    pts = as_coords(points)
    w, s, e, n = as_bbox(bbox)
    x = pts[..., 0]
    y = pts[..., 1]
    return (x >= w) & (x <= e) & (y >= s) & (y <= n)

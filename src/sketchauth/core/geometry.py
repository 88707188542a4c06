# -*- coding: utf-8 -*-
"""
src/sketchauth/core/geometry.py

Pure numeric helpers shared by the fingerprint pipeline.

Point sequences are handled as NumPy arrays of shape (k, 2) with float64
coordinates. Nothing in this module keeps state or touches the rest of the
package, so it is safe to use anywhere.
"""

import math
from typing import NamedTuple, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]


class BoundingBox(NamedTuple):
    """Axis-aligned extent of a point sequence."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def span(self) -> float:
        """The longer of the two sides."""
        return max(self.width, self.height)

    @property
    def center(self) -> Point:
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)


def as_points(points) -> np.ndarray:
    """
    Coerces a sequence of (x, y) pairs into a float64 array of shape (k, 2).

    Args:
        points: Any sequence of coordinate pairs, or an existing array.

    Returns:
        np.ndarray: A new (k, 2) array. An empty input gives shape (0, 2).

    Raises:
        ValueError: If the input cannot be read as coordinate pairs.
    """
    array = np.array(points, dtype=np.float64)
    if array.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"Expected a sequence of (x, y) pairs, got shape {array.shape}.")
    return array


def segment_length(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two 2D points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def centroid(points) -> np.ndarray:
    """
    Mean of the x coordinates and mean of the y coordinates.

    Raises:
        ValueError: For an empty sequence. Empty strokes must be filtered
                    out before they reach the pipeline.
    """
    array = as_points(points)
    if len(array) == 0:
        raise ValueError("Cannot compute the centroid of an empty point sequence.")
    return array.mean(axis=0)


def bounding_box(points) -> BoundingBox:
    """Returns the axis-aligned bounding box of a non-empty point sequence."""
    array = as_points(points)
    if len(array) == 0:
        raise ValueError("Cannot compute the bounding box of an empty point sequence.")
    mins = array.min(axis=0)
    maxs = array.max(axis=0)
    return BoundingBox(float(mins[0]), float(maxs[0]), float(mins[1]), float(maxs[1]))


def path_length(points) -> float:
    """Sum of the consecutive segment lengths; 0.0 for fewer than two points."""
    array = as_points(points)
    if len(array) < 2:
        return 0.0
    deltas = np.diff(array, axis=0)
    return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())

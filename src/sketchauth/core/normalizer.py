# -*- coding: utf-8 -*-
"""
src/sketchauth/core/normalizer.py

Removes position and size from a captured stroke.

The stroke is moved so its centroid sits at the origin and then scaled
uniformly so that the longer side of its bounding box equals the canonical
size. Rotation is left untouched: a gesture drawn at a different angle is
a different pattern.
"""

import numpy as np

from .geometry import as_points, bounding_box, centroid

DEFAULT_CANONICAL_SIZE = 200.0


def normalize(stroke, canonical_size: float = DEFAULT_CANONICAL_SIZE) -> np.ndarray:
    """
    Centers a stroke on its centroid and scales it to the canonical size.

    Args:
        stroke: Sequence of (x, y) pairs in capture order.
        canonical_size (float): Target length of the longer bounding-box side.

    Returns:
        np.ndarray: A (k, 2) array with the same point count and order as the
                    input. An empty stroke yields an empty array.
    """
    if canonical_size <= 0:
        raise ValueError(f"canonical_size must be positive, got {canonical_size}.")

    points = as_points(stroke)
    if len(points) == 0:
        return points

    translated = points - centroid(points)

    # A single point or a zero-extent stroke keeps its (zero) size.
    span = bounding_box(translated).span or 1.0

    return translated * (canonical_size / span)

# -*- coding: utf-8 -*-
"""
src/sketchauth/core/resampler.py

Arc-length resampling of a polyline to a fixed number of points.

Two strokes drawn at different speeds, or captured by devices reporting at
different rates, end up with very different point counts. Redistributing
each stroke into the same number of points spaced evenly along its path is
what makes them comparable index by index.
"""

import numpy as np

from .geometry import as_points, path_length, segment_length

DEFAULT_RESAMPLE_COUNT = 64

# Relative shortfall still treated as having reached the next sample.
REACH_TOLERANCE = 1e-9


def resample(points, n: int = DEFAULT_RESAMPLE_COUNT) -> np.ndarray:
    """
    Redistributes a polyline into exactly `n` points evenly spaced by arc length.

    The walk goes left to right over the segments with a cursor and a
    distance accumulator. Whenever the accumulated distance plus the current
    segment reaches the target interval, a point is interpolated on that
    segment, emitted, and the walk continues from it over the remainder of
    the same segment.

    Args:
        points: Sequence of (x, y) pairs.
        n (int): Number of output points, at least 1.

    Returns:
        np.ndarray: An (n, 2) array, or an empty (0, 2) array for empty input.
                    If rounding leaves the walk short of `n` points, the last
                    emitted point is repeated.
    """
    if n < 1:
        raise ValueError(f"Resample count must be at least 1, got {n}.")

    source = as_points(points)
    if len(source) == 0:
        return source

    start = (float(source[0, 0]), float(source[0, 1]))
    interval = path_length(source) / (n - 1) if n > 1 else 0.0
    if interval <= 0.0:
        # Single point, zero-length path or n == 1.
        return np.tile(np.array(start, dtype=np.float64), (n, 1))

    reach = interval * (1.0 - REACH_TOLERANCE)
    emitted = [start]
    accumulated = 0.0
    previous = start
    cursor = 1

    while cursor < len(source) and len(emitted) < n:
        current = (float(source[cursor, 0]), float(source[cursor, 1]))
        distance = segment_length(previous, current)

        if distance > 0.0 and accumulated + distance >= reach:
            t = min(1.0, (interval - accumulated) / distance)
            inserted = (
                previous[0] + t * (current[0] - previous[0]),
                previous[1] + t * (current[1] - previous[1]),
            )
            emitted.append(inserted)
            accumulated = 0.0
            # Stay on this segment; its remainder is scanned from the new point.
            previous = inserted
        else:
            accumulated += distance
            previous = current
            cursor += 1

    while len(emitted) < n:
        emitted.append(emitted[-1])

    return np.array(emitted[:n], dtype=np.float64)

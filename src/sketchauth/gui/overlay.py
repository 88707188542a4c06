# -*- coding: utf-8 -*-
"""
src/sketchauth/gui/overlay.py

Maps a fingerprint back into canvas coordinates for display.

Fingerprints are centered on the origin in canonical-size units. To draw
one over the sketch canvas it is re-fitted into a fraction of the canvas
and centered there. This transform is for display only and has no part in
matching.
"""

import numpy as np

from ..core.geometry import as_points, bounding_box

DEFAULT_FILL = 0.6


def fit_to_view(points, width: float, height: float, fill: float = DEFAULT_FILL) -> np.ndarray:
    """
    Scales and centers points to fit inside `fill` of a width x height view.

    Args:
        points: Sequence of (x, y) pairs, typically a saved fingerprint.
        width (float): View width in pixels.
        height (float): View height in pixels.
        fill (float): Fraction of each view dimension the shape may use.

    Returns:
        np.ndarray: The mapped (k, 2) array, empty for empty input.
    """
    array = as_points(points)
    if len(array) == 0:
        return array

    box = bounding_box(array)
    box_width = box.width or 1.0
    box_height = box.height or 1.0
    scale = min((width * fill) / box_width, (height * fill) / box_height)

    center_x, center_y = box.center
    offset = np.array([width / 2.0 - center_x * scale, height / 2.0 - center_y * scale])
    return array * scale + offset

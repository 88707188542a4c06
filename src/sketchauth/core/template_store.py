# -*- coding: utf-8 -*-
"""
src/sketchauth/core/template_store.py

Owns the single saved template and its JSON transfer form.

The template is kept in one named slot of a `BlobStore`. Its serialized
form is a JSON array of `{"x": ..., "y": ...}` objects, the same layout the
browser version of the sketch password wrote, so exported files move
freely between the two. Imports also accept plain `[x, y]` pairs.
"""

import json
import logging
import math
import threading
from numbers import Real
from typing import List, Optional, Tuple

import numpy as np

from ..utils.blob_store import BlobStore
from .errors import InputTooShortError, MalformedTemplateError, NoTemplateError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_KEY = "sketch_template_v1"
MIN_TEMPLATE_POINTS = 8


def _coerce_pair(item) -> Tuple[float, float]:
    """Reads one coordinate pair from a decoded JSON value."""
    if isinstance(item, dict):
        if "x" not in item or "y" not in item:
            raise MalformedTemplateError("Template point is missing 'x' or 'y'.")
        values = (item["x"], item["y"])
    elif isinstance(item, (list, tuple)) and len(item) == 2:
        values = tuple(item)
    else:
        raise MalformedTemplateError(f"Template point has an unexpected form: {item!r}")

    pair = []
    for value in values:
        # bool is a Real subclass but never a coordinate.
        if isinstance(value, bool) or not isinstance(value, Real):
            raise MalformedTemplateError(f"Template coordinate is not a number: {value!r}")
        try:
            coordinate = float(value)
        except OverflowError as e:
            raise MalformedTemplateError("Template coordinate is too large.") from e
        if not math.isfinite(coordinate):
            raise MalformedTemplateError(f"Template coordinate is not finite: {coordinate!r}")
        pair.append(coordinate)
    return pair[0], pair[1]


def decode_template(data) -> np.ndarray:
    """
    Parses a serialized template into a (k, 2) array.

    Args:
        data (bytes | str): JSON text.

    Raises:
        MalformedTemplateError: If the payload is not JSON, not an array, or
                                contains anything but finite coordinate pairs.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedTemplateError(f"Template is not UTF-8 text: {e}") from e

    try:
        parsed = json.loads(data)
    except RecursionError as e:
        raise MalformedTemplateError("Template JSON is nested too deeply.") from e
    except (TypeError, ValueError) as e:
        raise MalformedTemplateError(f"Template is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise MalformedTemplateError("Template must be a JSON array of points.")

    points: List[Tuple[float, float]] = [_coerce_pair(item) for item in parsed]
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array(points, dtype=np.float64)


def encode_template(fingerprint: np.ndarray) -> bytes:
    """Serializes a fingerprint as a JSON array of {"x", "y"} objects."""
    points = [{"x": float(x), "y": float(y)} for x, y in fingerprint]
    return json.dumps(points).encode("utf-8")


def _validated(fingerprint) -> np.ndarray:
    try:
        array = np.array(fingerprint, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise MalformedTemplateError(f"Fingerprint is not numeric: {e}") from e
    if array.ndim != 2 or array.shape[1] != 2 or len(array) == 0:
        raise MalformedTemplateError(f"Fingerprint must be a non-empty (k, 2) array, got shape {array.shape}.")
    if not np.isfinite(array).all():
        raise MalformedTemplateError("Fingerprint contains non-finite coordinates.")
    return array


class TemplateStore:
    """
    Typed wrapper around one blob-store slot holding the saved fingerprint.

    All mutations are serialized by a re-entrant lock so a concurrent reader
    never observes a half-replaced template.
    """

    def __init__(self, blob_store: BlobStore, key: str = DEFAULT_TEMPLATE_KEY,
                 min_points: int = MIN_TEMPLATE_POINTS):
        """
        Args:
            blob_store (BlobStore): Persistence backend.
            key (str): Name of the slot holding the template.
            min_points (int): Shortest template accepted by `import_bytes`.
        """
        self.blob_store = blob_store
        self.key = key
        self.min_points = min_points
        self._lock = threading.RLock()

    def save(self, fingerprint: np.ndarray) -> None:
        """Stores `fingerprint`, replacing any existing template."""
        array = _validated(fingerprint)
        with self._lock:
            self.blob_store.set(self.key, encode_template(array))
        logger.info(f"Template saved ({len(array)} points).")

    def load(self) -> Optional[np.ndarray]:
        """Returns the saved template, or None if there is none."""
        with self._lock:
            blob = self.blob_store.get(self.key)
        if blob is None:
            return None
        try:
            return decode_template(blob)
        except MalformedTemplateError as e:
            logger.error(f"Stored template under '{self.key}' is unreadable: {e}")
            return None

    def exists(self) -> bool:
        return self.load() is not None

    def remove(self) -> None:
        """Deletes the template. Removing an absent template does nothing."""
        with self._lock:
            self.blob_store.delete(self.key)
        logger.info("Template removed.")

    def export_bytes(self) -> bytes:
        """
        Returns the serialized template.

        Raises:
            NoTemplateError: If no template is saved.
        """
        template = self.load()
        if template is None:
            raise NoTemplateError("No template to export.")
        return encode_template(template)

    def import_bytes(self, data) -> np.ndarray:
        """
        Replaces the template with a serialized one.

        The payload is fully decoded and validated before anything is
        written; on failure the current template is left as it was.

        Returns:
            np.ndarray: The imported template.

        Raises:
            MalformedTemplateError: If the payload does not decode to a list
                                    of finite coordinate pairs.
            InputTooShortError: If it has fewer than `min_points` points.
        """
        template = decode_template(data)
        if len(template) < self.min_points:
            raise InputTooShortError(
                f"Template has too few points ({len(template)}, need at least {self.min_points})."
            )
        with self._lock:
            self.blob_store.set(self.key, encode_template(template))
        logger.info(f"Template imported ({len(template)} points).")
        return template

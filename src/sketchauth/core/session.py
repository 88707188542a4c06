# -*- coding: utf-8 -*-
"""
src/sketchauth/core/session.py

Drives the capture -> fingerprint -> save | verify workflow.

The controller holds the transient state of one session: the stroke being
drawn, whether a capture is in progress, the threshold, and the outcome of
the last action. The template itself lives in the injected `TemplateStore`.

Saving and verifying use different minimum stroke lengths (8 and 3 points
by default). The higher floor for saving keeps a near-empty gesture from
becoming the reference pattern; both floors are configurable.
"""

import logging
import math
import threading
from typing import List, Optional

import numpy as np

from .errors import InputTooShortError, NoTemplateError, SketchAuthError
from .fingerprint import DEFAULT_PROFILE, Profile, build_fingerprint
from .geometry import Point
from .matcher import MatchResult, match
from .template_store import TemplateStore

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 18.0
MIN_SAVE_POINTS = 8
MIN_VERIFY_POINTS = 3


class SessionController:
    """
    Orchestrates capture, template saving and verification for one user.
    """

    def __init__(self, template_store: TemplateStore, threshold: float = DEFAULT_THRESHOLD,
                 profile: Profile = DEFAULT_PROFILE, min_save_points: int = MIN_SAVE_POINTS,
                 min_verify_points: int = MIN_VERIFY_POINTS):
        """
        Args:
            template_store (TemplateStore): Where the template is kept.
            threshold (float): Highest score still accepted as a match.
            profile (Profile): Canonical size and resample count.
            min_save_points (int): Shortest stroke accepted as a template.
            min_verify_points (int): Shortest stroke accepted for verification.
        """
        self.template_store = template_store
        self.profile = profile
        self.min_save_points = min_save_points
        self.min_verify_points = min_verify_points

        self.stroke: List[Point] = []
        self.is_capturing = False
        self.last_result: Optional[MatchResult] = None
        self.message = ""

        self._threshold = 0.0
        self.threshold = threshold
        self._lock = threading.RLock()

    # --- Configuration ---

    @property
    def threshold(self) -> float:
        """Lower is stricter."""
        return self._threshold

    @threshold.setter
    def threshold(self, value: float):
        if math.isnan(value) or value < 0:
            raise ValueError(f"Threshold must be non-negative, got {value}.")
        self._threshold = float(value)

    # --- Capture ---

    def begin_capture(self, point: Point) -> None:
        """Starts a new stroke at `point`."""
        with self._lock:
            self.stroke = [(float(point[0]), float(point[1]))]
            self.is_capturing = True
            self.message = ""
        logger.debug(f"Capture started at {point}")

    def extend_capture(self, point: Point) -> None:
        """Appends `point` to the stroke; ignored outside a capture."""
        with self._lock:
            if not self.is_capturing:
                return
            self.stroke.append((float(point[0]), float(point[1])))

    def end_capture(self) -> None:
        """Stops capturing. The stroke is kept for the next action."""
        with self._lock:
            if self.is_capturing:
                logger.debug(f"Capture ended with {len(self.stroke)} points.")
            self.is_capturing = False

    def clear(self) -> None:
        """Forgets the current stroke, message and last result."""
        with self._lock:
            self.stroke = []
            self.is_capturing = False
            self.last_result = None
            self.message = ""

    # --- Template workflow ---

    def _fail(self, error: SketchAuthError) -> SketchAuthError:
        self.message = error.message
        logger.warning(error.message)
        return error

    def save_as_template(self) -> np.ndarray:
        """
        Fingerprints the current stroke and stores it as the template.

        Raises:
            InputTooShortError: If the stroke has fewer than `min_save_points`.
        """
        with self._lock:
            if len(self.stroke) < self.min_save_points:
                raise self._fail(InputTooShortError("Draw a longer pattern before saving."))
            fingerprint = build_fingerprint(self.stroke, self.profile)
            self.template_store.save(fingerprint)
            self.message = "Template saved."
        return fingerprint

    def verify(self) -> MatchResult:
        """
        Compares the current stroke with the saved template.

        Raises:
            NoTemplateError: If no template is saved.
            InputTooShortError: If the stroke has fewer than `min_verify_points`.
        """
        with self._lock:
            template = self.template_store.load()
            if template is None:
                raise self._fail(NoTemplateError("No template saved."))
            if len(self.stroke) < self.min_verify_points:
                raise self._fail(InputTooShortError("Draw something to verify."))
            if not self.profile.is_compatible(template):
                logger.warning(f"Template has {len(template)} points but the profile expects "
                               f"{self.profile.resample_count}; it cannot match.")

            candidate = build_fingerprint(self.stroke, self.profile)
            result = match(candidate, template, self.threshold)
            self.last_result = result
            self.message = result.message
        return result

    def remove_template(self) -> None:
        with self._lock:
            self.template_store.remove()
            self.message = "Template removed."

    def export_template(self) -> bytes:
        """Returns the serialized template; raises NoTemplateError if absent."""
        try:
            data = self.template_store.export_bytes()
        except NoTemplateError as e:
            raise self._fail(e)
        self.message = "Template exported."
        return data

    def import_template(self, data) -> np.ndarray:
        """
        Replaces the template with a serialized one. On failure the existing
        template is kept and the error is re-raised.
        """
        with self._lock:
            try:
                template = self.template_store.import_bytes(data)
            except SketchAuthError as e:
                self._fail(e)
                self.message = f"Invalid template file. {e.message}"
                raise
            self.message = "Template imported."
        return template

    def template_for_display(self) -> Optional[np.ndarray]:
        """The saved template for overlays, or None."""
        return self.template_store.load()

    def replay_template(self) -> np.ndarray:
        """Returns the template to animate; raises NoTemplateError if absent."""
        template = self.template_store.load()
        if template is None:
            raise self._fail(NoTemplateError("No template saved to replay."))
        return template

# -*- coding: utf-8 -*-
"""
src/sketchauth/core/matcher.py

Scores a candidate fingerprint against the stored template and turns the
score into an accept/reject verdict.

The score is the mean Euclidean distance between corresponding points, in
canonical-size units. The threshold is chosen by the caller: tightening it
raises false rejections, loosening it raises false acceptances.
"""

import logging
import math
from dataclasses import dataclass, field

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one verification attempt. Never persisted."""
    score: float
    threshold: float
    accepted: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "accepted", self.score <= self.threshold)

    @property
    def message(self) -> str:
        if self.accepted:
            return f"Matched (score {self.score:.2f}). Access granted."
        return f"Not matched (score {self.score:.2f}). Try again."


def score(fingerprint_a: np.ndarray, fingerprint_b: np.ndarray) -> float:
    """
    Mean pointwise Euclidean distance between two fingerprints.

    Returns:
        float: 0.0 for identical fingerprints, larger for less similar ones.
               `math.inf` when the lengths differ or there is nothing to
               compare, so a caller skipping the length check still rejects.
    """
    a = np.asarray(fingerprint_a, dtype=np.float64)
    b = np.asarray(fingerprint_b, dtype=np.float64)

    if a.shape != b.shape or len(a) == 0:
        logger.warning(f"Cannot compare fingerprints of shapes {a.shape} and {b.shape}.")
        return math.inf

    deltas = a - b
    return float(np.hypot(deltas[:, 0], deltas[:, 1]).mean())


def match(candidate: np.ndarray, template: np.ndarray, threshold: float) -> MatchResult:
    """Scores `candidate` against `template` and applies `threshold`."""
    if threshold < 0:
        raise ValueError(f"Threshold must be non-negative, got {threshold}.")

    result = MatchResult(score=score(candidate, template), threshold=threshold)
    logger.info(f"Match score {result.score:.3f} against threshold {threshold}: "
                f"{'accepted' if result.accepted else 'rejected'}.")
    return result

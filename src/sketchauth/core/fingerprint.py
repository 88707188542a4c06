# -*- coding: utf-8 -*-
"""
src/sketchauth/core/fingerprint.py

Turns a raw stroke into its canonical fingerprint.

A fingerprint is the normalized stroke resampled to a fixed point count.
The canonical size and the point count together form a `Profile`; two
fingerprints are only comparable when they were built with the same one.
Changing either constant invalidates every template saved before.
"""

from dataclasses import dataclass

import numpy as np

from .normalizer import DEFAULT_CANONICAL_SIZE, normalize
from .resampler import DEFAULT_RESAMPLE_COUNT, resample


@dataclass(frozen=True)
class Profile:
    """Canonical size and resample count used to build fingerprints."""
    canonical_size: float = DEFAULT_CANONICAL_SIZE
    resample_count: int = DEFAULT_RESAMPLE_COUNT

    def __post_init__(self):
        if self.canonical_size <= 0:
            raise ValueError(f"canonical_size must be positive, got {self.canonical_size}.")
        if self.resample_count < 1:
            raise ValueError(f"resample_count must be at least 1, got {self.resample_count}.")

    def is_compatible(self, fingerprint: np.ndarray) -> bool:
        """True if the fingerprint has the point count this profile produces."""
        return fingerprint is not None and len(fingerprint) == self.resample_count


DEFAULT_PROFILE = Profile()


def build_fingerprint(stroke, profile: Profile = DEFAULT_PROFILE) -> np.ndarray:
    """
    Normalizes and resamples a stroke into a fingerprint.

    Args:
        stroke: Sequence of (x, y) pairs in capture order.
        profile (Profile): Canonical size and point count to use.

    Returns:
        np.ndarray: A (profile.resample_count, 2) array, or an empty array
                    for an empty stroke.
    """
    return resample(normalize(stroke, profile.canonical_size), profile.resample_count)

# -*- coding: utf-8 -*-
"""
The Core Package for SketchAuth.

This package holds everything that decides whether two gestures match,
independent of any user interface:
- `geometry`: centroid, bounding box and path length helpers.
- `normalizer`: centers a stroke and scales it to the canonical size.
- `resampler`: redistributes a stroke into a fixed number of points.
- `fingerprint`: composes the two into one transform, plus the `Profile`.
- `matcher`: scores two fingerprints and applies the threshold.
- `template_store`: owns the saved template and its JSON transfer form.
- `session`: the capture -> save | verify workflow.
"""

from .errors import InputTooShortError, MalformedTemplateError, NoTemplateError, SketchAuthError
from .fingerprint import DEFAULT_PROFILE, Profile, build_fingerprint
from .matcher import MatchResult, match, score
from .normalizer import normalize
from .resampler import resample
from .session import SessionController
from .template_store import TemplateStore

__all__ = [
    "DEFAULT_PROFILE",
    "InputTooShortError",
    "MalformedTemplateError",
    "MatchResult",
    "NoTemplateError",
    "Profile",
    "SessionController",
    "SketchAuthError",
    "TemplateStore",
    "build_fingerprint",
    "match",
    "normalize",
    "resample",
    "score",
]

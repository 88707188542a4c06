# -*- coding: utf-8 -*-
"""
SketchAuth Application Package.

Captures a freehand gesture, reduces it to a position- and scale-invariant
fingerprint and compares it against one saved template. The geometric
pipeline and the template workflow live in `sketchauth.core`; the PyQt6
window in `sketchauth.app` and `sketchauth.gui`.
"""

__version__ = "0.1.0"

from .core import (
    DEFAULT_PROFILE,
    InputTooShortError,
    MalformedTemplateError,
    MatchResult,
    NoTemplateError,
    Profile,
    SessionController,
    SketchAuthError,
    TemplateStore,
    build_fingerprint,
    match,
    normalize,
    resample,
    score,
)

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

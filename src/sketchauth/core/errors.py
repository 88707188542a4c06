# -*- coding: utf-8 -*-
"""
src/sketchauth/core/errors.py

Recoverable failures of the template workflow. Each one carries the message
shown to the user, so callers can tell causes apart without parsing text.
"""


class SketchAuthError(Exception):
    """Base class for user-facing workflow failures."""
    default_message = "Operation failed."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class InputTooShortError(SketchAuthError):
    """A stroke or imported template has fewer points than required."""
    default_message = "Pattern too short."


class NoTemplateError(SketchAuthError):
    """An operation needs a saved template and none exists."""
    default_message = "No template saved."


class MalformedTemplateError(SketchAuthError):
    """A template payload could not be decoded or has the wrong shape."""
    default_message = "Invalid template file."

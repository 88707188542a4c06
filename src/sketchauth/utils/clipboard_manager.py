# -*- coding: utf-8 -*-
"""
src/sketchauth/utils/clipboard_manager.py

A simple wrapper utility for interacting with the system clipboard.

Used to hand an exported template to the user as text, next to the
file-based export. Clipboard access can fail on systems without a
clipboard mechanism, so failures are reported instead of raised.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copies the given text to the system clipboard.

    Args:
        text (str): The string to be copied.

    Returns:
        bool: True if the text was copied successfully, False otherwise.
    """
    try:
        pyperclip.copy(text)
        logger.info(f"Copied {len(text)} characters to the clipboard.")
        return True
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to copy text to clipboard: {e}")
        logger.warning(
            "Clipboard functionality may not be available on this system. "
            "If on Linux, please ensure 'xclip' or 'xsel' is installed."
        )
        return False


def paste_from_clipboard() -> str:
    """Returns the clipboard text, or an empty string if it cannot be read."""
    try:
        return pyperclip.paste() or ""
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to read the clipboard: {e}")
        return ""

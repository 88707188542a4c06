# -*- coding: utf-8 -*-
"""
src/sketchauth/config.py

Module for handling application configuration.

This module defines default settings for SketchAuth, such as the match
threshold, the fingerprint profile and the capture floors. It loads
user-defined settings from a configuration file (config.ini), creating one
with default values on the first run.

Note that canonical_size and resample_count define the fingerprint profile:
changing either one makes every previously saved template incomparable.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Optional

from .core.fingerprint import Profile
from .core.normalizer import DEFAULT_CANONICAL_SIZE
from .core.resampler import DEFAULT_RESAMPLE_COUNT
from .core.session import DEFAULT_THRESHOLD, MIN_SAVE_POINTS, MIN_VERIFY_POINTS
from .core.template_store import DEFAULT_TEMPLATE_KEY

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "SketchAuth"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_STORE_DIRNAME = "templates"


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    This directory is used to store the configuration file and the saved
    template.

    - Windows: %APPDATA%/SketchAuth
    - macOS: ~/Library/Application Support/SketchAuth
    - Linux: ~/.config/SketchAuth

    Returns:
        Path: A Path object to the application's data directory.
    """
    if platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":  # macOS
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:  # Linux and other Unix-like
        app_dir = Path.home() / ".config" / APP_NAME

    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


class Config:
    """
    Manages application configuration by loading defaults and overriding
    them with settings from a user-specific config file.
    """

    def __init__(self, app_dir: Optional[Path] = None):
        """
        Initializes the configuration manager.

        Args:
            app_dir (Path, optional): Directory holding config.ini and the
                                      template store. Defaults to the
                                      platform application directory.
        """
        self.parser = configparser.ConfigParser()
        self.app_dir = Path(app_dir) if app_dir is not None else get_app_dir()
        self.app_dir.mkdir(parents=True, exist_ok=True)
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Sets the default configuration values in the parser object."""
        self.parser["Matching"] = {
            "threshold": str(DEFAULT_THRESHOLD),
            "canonical_size": str(DEFAULT_CANONICAL_SIZE),
            "resample_count": str(DEFAULT_RESAMPLE_COUNT),
        }
        self.parser["Capture"] = {
            "min_save_points": str(MIN_SAVE_POINTS),
            "min_verify_points": str(MIN_VERIFY_POINTS),
        }
        self.parser["Storage"] = {
            "template_key": DEFAULT_TEMPLATE_KEY,
            "store_dirname": DEFAULT_STORE_DIRNAME,
        }
        self.parser["Display"] = {
            "show_overlay": "True",
            "replay_interval_ms": "16",
            "overlay_fill": "0.6",
        }

    def _load_from_file(self):
        """
        Loads settings from the config.ini file, overriding defaults.
        If the file doesn't exist, it will be created with default values.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
        else:
            self.parser.read(self.config_file_path)

    def _save_defaults(self):
        """Saves the current (default) configuration to the config file."""
        try:
            with open(self.config_file_path, 'w') as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# Changing canonical_size or resample_count invalidates saved templates.\n\n")
                self.parser.write(configfile)
        except IOError as e:
            # Non-critical: the defaults are still in memory.
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    # --- Properties to access settings easily and with correct types ---

    @property
    def threshold(self) -> float:
        """Highest match score still accepted. Lower is stricter."""
        return self.parser.getfloat("Matching", "threshold", fallback=DEFAULT_THRESHOLD)

    @property
    def canonical_size(self) -> float:
        """Bounding-box span of a normalized stroke."""
        return self.parser.getfloat("Matching", "canonical_size", fallback=DEFAULT_CANONICAL_SIZE)

    @property
    def resample_count(self) -> int:
        """Number of points in every fingerprint."""
        return self.parser.getint("Matching", "resample_count", fallback=DEFAULT_RESAMPLE_COUNT)

    @property
    def profile(self) -> Profile:
        return Profile(canonical_size=self.canonical_size, resample_count=self.resample_count)

    @property
    def min_save_points(self) -> int:
        return self.parser.getint("Capture", "min_save_points", fallback=MIN_SAVE_POINTS)

    @property
    def min_verify_points(self) -> int:
        return self.parser.getint("Capture", "min_verify_points", fallback=MIN_VERIFY_POINTS)

    @property
    def template_key(self) -> str:
        return self.parser.get("Storage", "template_key", fallback=DEFAULT_TEMPLATE_KEY)

    @property
    def template_dir(self) -> Path:
        """The directory the file blob store writes the template into."""
        dirname = self.parser.get("Storage", "store_dirname", fallback=DEFAULT_STORE_DIRNAME)
        return self.app_dir / dirname

    @property
    def show_overlay(self) -> bool:
        """Whether the saved template is drawn faintly behind the canvas."""
        return self.parser.getboolean("Display", "show_overlay", fallback=True)

    @property
    def replay_interval_ms(self) -> int:
        """Delay between two frames of the template replay."""
        return self.parser.getint("Display", "replay_interval_ms", fallback=16)

    @property
    def overlay_fill(self) -> float:
        """Fraction of the canvas the overlay and replay are fitted into."""
        return self.parser.getfloat("Display", "overlay_fill", fallback=0.6)


_config: Optional[Config] = None


def get_config() -> Config:
    """Returns the shared Config instance, creating it on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config

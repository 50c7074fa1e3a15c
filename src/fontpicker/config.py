# -*- coding: utf-8 -*-
"""
src/fontpicker/config.py

Module for handling application configuration.

This module defines the default settings for FontPicker, namely the user
interface language and the font the application renders its main views with.
It loads user-defined settings from a configuration file (config.ini),
creating one with default values on the first run, and writes the font back
when the user confirms a new one in the font selector.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Optional

from .core.font_descriptor import MAX_FONT_SIZE, FontDescriptor, FontStyle

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "FontPicker"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_LANGUAGE = "en"
DEFAULT_FONT = FontDescriptor("SansSerif", 12, FontStyle.PLAIN)


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    This directory holds the configuration file and any extra translation
    files.

    - Windows: %APPDATA%/FontPicker
    - macOS: ~/Library/Application Support/FontPicker
    - Linux: ~/.config/FontPicker

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
            app_dir (Path, optional): Directory holding config.ini. Defaults
                                      to the per-user application directory.
        """
        self.parser = configparser.ConfigParser()
        self.app_dir = Path(app_dir) if app_dir is not None else get_app_dir()
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Sets the default configuration values in the parser object."""
        self.parser["General"] = {
            "language": DEFAULT_LANGUAGE
        }
        self.parser["Font"] = {
            "family": DEFAULT_FONT.family,
            "size": str(DEFAULT_FONT.size),
            "style": DEFAULT_FONT.style.display_name
        }

    def _load_from_file(self):
        """
        Loads settings from the config.ini file, overriding defaults.
        If the file doesn't exist, it will be created with default values.
        """
        if not self.config_file_path.exists():
            self._write()
        else:
            try:
                self.parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                logger.error(f"Could not parse config file at {self.config_file_path}, using defaults: {e}")

    def _write(self):
        """Saves the current configuration to the config file."""
        try:
            self.app_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, 'w', encoding="utf-8") as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# You can edit these values. Restart the app for changes to take effect.\n\n")
                self.parser.write(configfile)
        except OSError as e:
            # Non-critical: the app keeps running with the in-memory settings.
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    # --- Properties to access settings easily and with correct types ---

    @property
    def language(self) -> str:
        """The user interface language code."""
        return self.parser.get("General", "language", fallback=DEFAULT_LANGUAGE)

    @property
    def font(self) -> FontDescriptor:
        """The configured application font. Invalid entries fall back to the defaults."""
        family = self.parser.get("Font", "family", fallback=DEFAULT_FONT.family)

        try:
            size = self.parser.getint("Font", "size", fallback=DEFAULT_FONT.size)
            if not 1 <= size <= MAX_FONT_SIZE:
                raise ValueError(f"size {size} is out of range")
        except ValueError as e:
            logger.warning(f"Invalid font size in config, using {DEFAULT_FONT.size}: {e}")
            size = DEFAULT_FONT.size

        try:
            style = FontStyle.from_display_name(
                self.parser.get("Font", "style", fallback=DEFAULT_FONT.style.display_name)
            )
        except ValueError as e:
            logger.warning(f"Invalid font style in config, using {DEFAULT_FONT.style.display_name}: {e}")
            style = DEFAULT_FONT.style

        return FontDescriptor(family, size, style)

    def save_font(self, font: FontDescriptor):
        """Stores `font` as the application font and writes the config file."""
        self.parser["Font"] = {
            "family": font.family,
            "size": str(font.size),
            "style": font.style.display_name
        }
        self._write()
        logger.info(f"Saved application font: {font.describe()}")


_config: Optional[Config] = None


def get_config() -> Config:
    """Returns the shared Config, loading it on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config

"""
FontPicker Application Package.

This package contains a modal font selector for desktop applications and the
small host application around it: the font value types, the option lists,
the PyQt6 dialog, localization and configuration.

By importing the main application class here, we provide a simplified entry
point for the application runner.
"""

__version__ = "0.1.0"

from .app import FontPickerApp
from .core.font_descriptor import FontDescriptor, FontStyle

__all__ = ["FontPickerApp", "FontDescriptor", "FontStyle"]

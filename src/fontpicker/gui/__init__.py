# -*- coding: utf-8 -*-
"""
The GUI Package for FontPicker.

This package contains the user interface components of the font selector,
built using the PyQt6 framework: the selector panels, the anti-aliased
preview label and the modal dialog that combines them.

By importing the primary GUI classes here, we provide a simplified and
centralized access point for other parts of the application, such as the main
app controller.
"""

from .font_selector_dialog import DialogState, FontSelectorDialog, pick_font
from .preview_label import PreviewLabel
from .qt_fonts import to_qfont
from .selector_panel import SelectorPanel, SelectorState

__all__ = [
    "DialogState",
    "FontSelectorDialog",
    "pick_font",
    "PreviewLabel",
    "to_qfont",
    "SelectorPanel",
    "SelectorState",
]

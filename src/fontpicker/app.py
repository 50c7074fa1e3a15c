# -*- coding: utf-8 -*-
"""
src/fontpicker/app.py

Core application controller for FontPicker.

This module contains `FontPickerApp`, which owns a small "Appearance" window
showing the application font, opens the font selector from it, and applies
and persists the font the user confirms.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget, QLabel, QPushButton, QVBoxLayout, QHBoxLayout

from .config import Config, get_config
from .core.font_catalog import FontEnumerator
from .core.font_descriptor import FontDescriptor
from .gui.font_selector_dialog import pick_font
from .gui.preview_label import PreviewLabel
from .gui.qt_fonts import to_qfont
from .l10n import Localization, get_localization

logger = logging.getLogger(__name__)

SAMPLE_TEXT = "The quick brown fox jumps over the lazy dog 0123456789"


class FontPickerApp:
    """
    The main application controller. Manages the appearance window and the
    round trip through the font selector.
    """

    def __init__(self, config: Optional[Config] = None,
                 localization: Optional[Localization] = None,
                 font_enumerator: Optional[FontEnumerator] = None):
        self.config = config or get_config()
        self.localization = localization or get_localization()
        self.font_enumerator = font_enumerator
        self.current_font = self.config.font

        self.window = QWidget()
        self._setup_ui()
        self._apply_font(self.current_font)

    def _setup_ui(self):
        """Creates the appearance window."""
        _ = self.localization.lang
        self.window.setWindowTitle(_("Appearance"))

        layout = QVBoxLayout(self.window)
        layout.setContentsMargins(12, 12, 12, 12)

        self.sample_label = PreviewLabel(SAMPLE_TEXT)
        layout.addWidget(self.sample_label)

        row = QHBoxLayout()
        self.description_label = QLabel()
        row.addWidget(self.description_label, 1)
        self.select_button = QPushButton(_("Select font"))
        self.select_button.clicked.connect(self.select_font)
        row.addWidget(self.select_button)
        layout.addLayout(row)

    def _apply_font(self, font: FontDescriptor):
        self.current_font = font
        self.sample_label.setFont(to_qfont(font))
        self.description_label.setText(self.localization.lang("Current font: %0", font.describe()))

    def show(self):
        self.window.show()

    def select_font(self) -> Optional[FontDescriptor]:
        """
        Opens the font selector over the appearance window.

        On confirm the new font is applied to the window and saved to the
        config; on cancel nothing changes.

        Returns:
            Optional[FontDescriptor]: The confirmed font, or None.
        """
        chosen = pick_font(self.window, self.current_font, self.font_enumerator, self.localization.lang)
        if chosen is None:
            logger.info("Font selection cancelled, keeping current font.")
            return None

        self._apply_font(chosen)
        self.config.save_font(chosen)
        return chosen

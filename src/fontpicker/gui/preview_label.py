# -*- coding: utf-8 -*-
"""
src/fontpicker/gui/preview_label.py

A QLabel that always paints its text anti-aliased, used as the sample area
of the font selector.
"""

from PyQt6.QtWidgets import QLabel, QWidget
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter

PREVIEW_MIN_HEIGHT = 50


class PreviewLabel(QLabel):
    """Single-line sample text rendered with text anti-aliasing switched on."""

    def __init__(self, text: str, parent: QWidget = None):
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self.setMinimumHeight(PREVIEW_MIN_HEIGHT)

    def paintEvent(self, event):
        """Draws the label text with anti-aliasing render hints."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.setFont(self.font())
        painter.setPen(self.palette().color(self.foregroundRole()))
        painter.drawText(self.contentsRect(), int(self.alignment().value), self.text())
        painter.end()

# -*- coding: utf-8 -*-
"""
src/fontpicker/gui/qt_fonts.py

Conversion from FontDescriptor to QFont.
"""

from PyQt6.QtGui import QFont

from ..core.font_descriptor import FontDescriptor


def to_qfont(descriptor: FontDescriptor, antialias: bool = True) -> QFont:
    """
    Builds a QFont for the given descriptor.

    Args:
        descriptor (FontDescriptor): The font to build.
        antialias (bool): Ask the renderer to anti-alias the glyphs.
    """
    font = QFont(descriptor.family, descriptor.size)
    font.setBold(descriptor.style.is_bold)
    font.setItalic(descriptor.style.is_italic)
    if antialias:
        font.setStyleStrategy(QFont.StyleStrategy.PreferAntialias)
    return font


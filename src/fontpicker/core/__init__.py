# -*- coding: utf-8 -*-
"""
The Core Package for FontPicker.

Toolkit-independent pieces of the font selector: the font value types and
the option lists the selectors are filled from. Nothing in here imports Qt
at module level, so these modules can be used without a running
QApplication.
"""

from .font_descriptor import DEFAULT_FONT_SIZE, FontDescriptor, FontStyle, parse_size
from .font_catalog import (
    FONT_SIZES,
    FONT_STYLES,
    HIDDEN_FONT_SUFFIXES,
    FontEnumerator,
    available_font_families,
    filter_font_families,
    is_hidden_family,
)

__all__ = [
    "DEFAULT_FONT_SIZE",
    "FontDescriptor",
    "FontStyle",
    "parse_size",
    "FONT_SIZES",
    "FONT_STYLES",
    "HIDDEN_FONT_SUFFIXES",
    "FontEnumerator",
    "available_font_families",
    "filter_font_families",
    "is_hidden_family",
]

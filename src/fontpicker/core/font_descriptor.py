# -*- coding: utf-8 -*-
"""
src/fontpicker/core/font_descriptor.py

Value types describing a font choice.

A FontDescriptor is the (family, size, style) triple the font selector dialog
hands back to its caller. It is deliberately free of any Qt types so that the
configuration layer and the tests can work with it without a running
QApplication.
"""

import enum
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Size used whenever the size field cannot be parsed into a usable integer.
DEFAULT_FONT_SIZE = 14

# Largest size the toolkit accepts (a signed 32-bit int).
MAX_FONT_SIZE = 2**31 - 1

_SIZE_PATTERN = re.compile(r"[+-]?\d+")


class FontStyle(enum.IntEnum):
    """
    The four font styles offered by the selector.

    The integer value doubles as the row index in the style list, so the
    order of the members must not change.
    """
    PLAIN = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3

    @property
    def display_name(self) -> str:
        """The string shown in the style list and the style text field."""
        return _DISPLAY_NAMES[self]

    @property
    def is_bold(self) -> bool:
        return self in (FontStyle.BOLD, FontStyle.BOLD_ITALIC)

    @property
    def is_italic(self) -> bool:
        return self in (FontStyle.ITALIC, FontStyle.BOLD_ITALIC)

    @classmethod
    def from_display_name(cls, name: str) -> "FontStyle":
        """
        Looks up a style by its display string (case-insensitive).

        Raises:
            ValueError: If the name is not one of the four display strings.
        """
        key = name.strip().lower()
        for style, display in _DISPLAY_NAMES.items():
            if display == key:
                return style
        raise ValueError(f"Unknown font style: '{name}'")

    @classmethod
    def from_flags(cls, bold: bool, italic: bool) -> "FontStyle":
        if bold and italic:
            return cls.BOLD_ITALIC
        if bold:
            return cls.BOLD
        if italic:
            return cls.ITALIC
        return cls.PLAIN


_DISPLAY_NAMES = {
    FontStyle.PLAIN: "plain",
    FontStyle.BOLD: "bold",
    FontStyle.ITALIC: "italic",
    FontStyle.BOLD_ITALIC: "bold-italic",
}


@dataclass(frozen=True)
class FontDescriptor:
    """
    An immutable font choice: family name, point size and style.

    Attributes:
        family (str): The font family name. Not validated against the
                      installed fonts; the toolkit substitutes unknown ones.
        size (int): The point size, between 1 and MAX_FONT_SIZE.
        style (FontStyle): One of the four supported styles.
    """
    family: str
    size: int
    style: FontStyle = FontStyle.PLAIN

    def __post_init__(self):
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"Font size must be an integer, got {self.size!r}")
        if not 1 <= self.size <= MAX_FONT_SIZE:
            raise ValueError(f"Font size must be between 1 and {MAX_FONT_SIZE}, got {self.size}")
        # Accept plain ints for the style and normalise them to the enum.
        object.__setattr__(self, "style", FontStyle(self.style))

    def describe(self) -> str:
        """A short human-readable label, e.g. 'Arial 12 bold'."""
        return f"{self.family} {self.size} {self.style.display_name}"


def parse_size(text: str, default: int = DEFAULT_FONT_SIZE) -> int:
    """
    Parses the contents of the size field.

    Only an optionally signed run of decimal digits is accepted. Anything
    else, and any value outside 1..MAX_FONT_SIZE, yields the default rather
    than an error, so a half-typed size never blocks the preview or the
    confirm action.

    Args:
        text (str): The raw text of the size field.
        default (int): The size to fall back to.

    Returns:
        int: The parsed size, or `default`.
    """
    stripped = text.strip() if isinstance(text, str) else ""
    if not _SIZE_PATTERN.fullmatch(stripped):
        logger.debug(f"Could not parse font size '{text}', using {default}.")
        return default
    try:
        size = int(stripped)
    except ValueError:
        # More digits than int() will convert.
        logger.debug(f"Font size '{text}' is too long, using {default}.")
        return default
    if not 1 <= size <= MAX_FONT_SIZE:
        logger.debug(f"Font size {size} is out of range, using {default}.")
        return default
    return size

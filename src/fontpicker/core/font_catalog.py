# -*- coding: utf-8 -*-
"""
src/fontpicker/core/font_catalog.py

The option lists behind the three selectors of the font dialog.

Family names come from an injected enumerator (by default the Qt font
database), filtered to hide the synthetic per-style entries that some
platforms report as separate families. Sizes and styles are fixed.
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .font_descriptor import FontStyle

logger = logging.getLogger(__name__)

FontEnumerator = Callable[[], Iterable[str]]

# Some platforms list the default fonts a second time with these suffixes
# appended, e.g. "Dialog.bold". They are never real families.
HIDDEN_FONT_SUFFIXES: Tuple[str, ...] = (".bold", ".italic")

FONT_SIZES: Tuple[str, ...] = ("9", "10", "12", "14", "16", "18", "24")

FONT_STYLES: Tuple[str, ...] = tuple(style.display_name for style in FontStyle)


def is_hidden_family(name: str) -> bool:
    """True if the family name contains one of the hidden suffix markers."""
    return any(marker in name for marker in HIDDEN_FONT_SUFFIXES)


def filter_font_families(names: Iterable[str]) -> List[str]:
    """Drops hidden families, keeping the enumeration order of the rest."""
    return [name for name in names if not is_hidden_family(name)]


def qt_font_families() -> List[str]:
    """
    Lists the font families known to the Qt font database.

    Requires a QGuiApplication (or QApplication) to exist.
    """
    from PyQt6.QtGui import QFontDatabase
    return list(QFontDatabase.families())


def available_font_families(enumerator: Optional[FontEnumerator] = None) -> List[str]:
    """
    Returns the family names to offer in the family list.

    Enumeration failures degrade to an empty list so that the dialog can
    still be shown; the user can always type a family name by hand.

    Args:
        enumerator (FontEnumerator, optional): A callable returning family
            names. Defaults to `qt_font_families`.

    Returns:
        List[str]: The visible family names.
    """
    if enumerator is None:
        enumerator = qt_font_families
    try:
        names = list(enumerator())
    except (OSError, RuntimeError, ValueError) as e:
        logger.warning(f"Could not enumerate installed fonts, family list will be empty: {e}")
        return []

    families = filter_font_families(names)
    hidden = len(names) - len(families)
    if hidden:
        logger.debug(f"Hid {hidden} synthetic font family entries.")
    logger.info(f"Found {len(families)} font families.")
    return families

# -*- coding: utf-8 -*-
"""
src/fontpicker/gui/font_selector_dialog.py

Defines the FontSelectorDialog, a modal dialog for choosing a font family,
size and style with a live preview.

The dialog shows three selector panels side by side (family, size, style),
a preview area below them and OK/Cancel buttons. Picking an entry in any
list copies it into the panel's text field and refreshes the preview. The
size field also accepts free text; the family field does too, but the style
field only mirrors the style list.

Use `pick_font()` for the blocking, modal round trip. The dialog class itself
can be constructed without being shown, which is how the tests drive it.
"""

import enum
import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QApplication, QDialog, QGroupBox, QHBoxLayout, QPushButton, QVBoxLayout, QWidget
)

from ..core.font_catalog import FONT_SIZES, FONT_STYLES, FontEnumerator, available_font_families
from ..core.font_descriptor import FontDescriptor, FontStyle, parse_size
from ..l10n import Translator, lang
from .preview_label import PreviewLabel
from .qt_fonts import to_qfont
from .selector_panel import SelectorPanel

logger = logging.getLogger(__name__)

CONTENT_MARGIN = 12
PANEL_SPACING = 6
BUTTON_SPACING = 6


class DialogState(enum.Enum):
    """Lifecycle of a font selector. CONFIRMED and CANCELLED are final."""
    OPEN = "open"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class FontSelectorDialog(QDialog):
    """
    Modal dialog for selecting a font.

    Attributes:
        family_panel (SelectorPanel): Installed font families.
        size_panel (SelectorPanel): Preset sizes; the field accepts any text.
        style_panel (SelectorPanel): The four styles; the field is read-only.
        preview (PreviewLabel): Sample text in the currently described font.
        state (DialogState): Where the dialog is in its lifecycle.
    """

    def __init__(self, parent: Optional[QWidget], font: FontDescriptor,
                 font_enumerator: Optional[FontEnumerator] = None,
                 translator: Optional[Translator] = None):
        """
        Builds the dialog and pre-selects the entries matching `font`.

        Args:
            parent (QWidget, optional): The owner. The dialog is parented to
                                        the owner's top-level window.
            font (FontDescriptor): The font to start from.
            font_enumerator (FontEnumerator, optional): Supplies family
                names. Defaults to the Qt font database.
            translator (Translator, optional): Maps message keys to display
                text. Defaults to the process-wide localization.
        """
        super().__init__(parent.window() if parent is not None else None)
        self._lang = translator or lang
        self.state = DialogState.OPEN
        self._selected_font: Optional[FontDescriptor] = None

        self.setWindowTitle(self._lang("Font selection"))
        self.setModal(True)

        families = available_font_families(font_enumerator)
        self._setup_ui(families)
        self._preselect(font)

        # Listeners go in after pre-selection so that it does not echo back.
        for panel in (self.family_panel, self.size_panel, self.style_panel):
            panel.enable_sync()
            panel.selection_changed.connect(self.update_preview)

        self.update_preview()
        logger.info(f"Font selector opened with {font.describe()} and {len(families)} families.")

    def _setup_ui(self, families):
        """Creates and arranges the widgets within the dialog."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(CONTENT_MARGIN, CONTENT_MARGIN, CONTENT_MARGIN, CONTENT_MARGIN)

        list_row = QHBoxLayout()
        list_row.setSpacing(PANEL_SPACING)
        self.family_panel = SelectorPanel(self._lang("Font family"), families)
        self.size_panel = SelectorPanel(self._lang("Font size"), FONT_SIZES)
        self.style_panel = SelectorPanel(self._lang("Font style"), FONT_STYLES, editable=False)
        for panel in (self.family_panel, self.size_panel, self.style_panel):
            list_row.addWidget(panel, 1)
        layout.addLayout(list_row, 1)

        preview_box = QGroupBox(self._lang("Font preview"))
        preview_layout = QVBoxLayout(preview_box)
        self.preview = PreviewLabel(self._lang("Font preview"))
        preview_layout.addWidget(self.preview)
        layout.addWidget(preview_box)

        button_row = QHBoxLayout()
        button_row.setContentsMargins(0, CONTENT_MARGIN, 0, 0)
        button_row.addStretch(1)
        self.ok_button = QPushButton(self._lang("OK"))
        self.ok_button.setDefault(True)
        self.ok_button.clicked.connect(self.accept)
        button_row.addWidget(self.ok_button)
        button_row.addSpacing(BUTTON_SPACING)
        self.cancel_button = QPushButton(self._lang("Cancel"))
        self.cancel_button.clicked.connect(self.reject)
        button_row.addWidget(self.cancel_button)
        button_row.addStretch(1)
        layout.addLayout(button_row)

    def _preselect(self, font: FontDescriptor):
        """Fills the fields from `font` and selects the matching list entries where they exist."""
        self.family_panel.select_value(font.family)
        self.family_panel.set_text(font.family)

        size_text = str(font.size)
        self.size_panel.select_value(size_text)
        self.size_panel.set_text(size_text)

        self.style_panel.select_index(int(font.style))
        self.style_panel.set_text(self.style_panel.selected_value() or font.style.display_name)

    def current_font(self) -> FontDescriptor:
        """
        Describes the font the fields currently add up to.

        The family comes from the family text field, the style from the style
        list selection (plain if none) and the size from the size text field,
        falling back to the default size when it is not a positive integer.
        """
        index = self.style_panel.selected_index()
        style = FontStyle(index) if index is not None else FontStyle.PLAIN
        return FontDescriptor(self.family_panel.text(), parse_size(self.size_panel.text()), style)

    def update_preview(self):
        """Renders the preview text in the current font."""
        font = self.current_font()
        self.preview.setFont(to_qfont(font, antialias=True))
        logger.debug(f"Preview updated to {font.describe()}.")

    # --- Commit actions ---

    def accept(self):
        """Confirms the dialog, capturing the font at this moment. Ignored once closed."""
        if self.state is not DialogState.OPEN:
            logger.debug(f"Ignoring confirm, dialog already {self.state.value}.")
            return
        self._selected_font = self.current_font()
        self.state = DialogState.CONFIRMED
        logger.info(f"Font selection confirmed: {self._selected_font.describe()}")
        super().accept()

    def reject(self):
        """Cancels the dialog. Also reached through Escape and the window's close button."""
        if self.state is not DialogState.OPEN:
            logger.debug(f"Ignoring cancel, dialog already {self.state.value}.")
            return
        self.state = DialogState.CANCELLED
        logger.info("Font selection cancelled.")
        super().reject()

    def get_selected_font(self) -> Optional[FontDescriptor]:
        """The confirmed font, or None if the dialog was not confirmed."""
        if self.state is not DialogState.CONFIRMED:
            return None
        return self._selected_font

    def show_modal(self) -> Optional[FontDescriptor]:
        """
        Shows the dialog and blocks until the user confirms or cancels.

        Returns:
            Optional[FontDescriptor]: The confirmed font, or None.

        Raises:
            RuntimeError: If the dialog has already been closed once.
        """
        if self.state is not DialogState.OPEN:
            raise RuntimeError(f"Font selector is already {self.state.value} and cannot be reopened.")
        self.adjustSize()
        self._position_window()
        self.exec()
        return self.get_selected_font()

    def _position_window(self):
        """Centres the dialog over its owner window, or over the screen without one."""
        owner = self.parentWidget()
        if owner is not None:
            area = owner.frameGeometry()
        else:
            screen = QApplication.primaryScreen()
            if screen is None:
                return
            area = screen.availableGeometry()

        geometry = self.frameGeometry()
        geometry.moveCenter(area.center())
        self.move(geometry.topLeft())


def pick_font(owner: Optional[QWidget], font: FontDescriptor,
              font_enumerator: Optional[FontEnumerator] = None,
              translator: Optional[Translator] = None) -> Optional[FontDescriptor]:
    """
    Runs a font selector modally and returns the user's choice.

    Args:
        owner (QWidget, optional): Widget whose window owns the dialog.
        font (FontDescriptor): The initial font.
        font_enumerator (FontEnumerator, optional): Supplies family names.
        translator (Translator, optional): Message lookup.

    Returns:
        Optional[FontDescriptor]: The confirmed font, or None if cancelled.
    """
    dialog = FontSelectorDialog(owner, font, font_enumerator, translator)
    try:
        return dialog.show_modal()
    finally:
        dialog.deleteLater()

# -*- coding: utf-8 -*-
"""
src/fontpicker/gui/selector_panel.py

One axis of the font selector: a caption, a text field and a list of options.

Selecting a list entry copies it into the text field and emits
`selection_changed`. The opposite direction is intentionally not wired:
typing into the text field leaves the list selection untouched.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from PyQt6.QtWidgets import QWidget, QLabel, QLineEdit, QListWidget, QVBoxLayout, QAbstractItemView
from PyQt6.QtCore import pyqtSignal

logger = logging.getLogger(__name__)

FIELD_SPACING = 6


@dataclass(frozen=True)
class SelectorState:
    """A snapshot of one selector panel."""
    text_value: str
    list_selection: Optional[int]
    options: Tuple[str, ...]


class SelectorPanel(QWidget):
    """
    A captioned text field stacked above a single-selection list.

    Attributes:
        text_field (QLineEdit): Free-text input, or a read-only mirror of the
                                list when the panel is not editable.
        list_widget (QListWidget): The options.
    """
    # Emitted after a list selection change has been copied into the field.
    selection_changed = pyqtSignal()

    def __init__(self, caption: str, options: Sequence[str], editable: bool = True, parent: QWidget = None):
        super().__init__(parent)

        self.caption_label = QLabel(caption)
        self.text_field = QLineEdit()
        self.text_field.setReadOnly(not editable)
        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.list_widget.addItems(list(options))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(FIELD_SPACING)
        layout.addWidget(self.caption_label)
        layout.addWidget(self.text_field)
        layout.addWidget(self.list_widget, 1)

        self._synced = False

    def enable_sync(self):
        """
        Starts mirroring list selections into the text field.

        Kept separate from the constructor so the owner can pre-select
        entries without triggering its own listeners.
        """
        if self._synced:
            return
        self.list_widget.itemSelectionChanged.connect(self._on_selection_changed)
        self._synced = True

    def _on_selection_changed(self):
        value = self.selected_value()
        if value is not None:
            self.text_field.setText(value)
        logger.debug(f"'{self.caption_label.text()}' selection changed to {value!r}.")
        self.selection_changed.emit()

    # --- Accessors ---

    def options(self) -> Tuple[str, ...]:
        return tuple(self.list_widget.item(i).text() for i in range(self.list_widget.count()))

    def text(self) -> str:
        return self.text_field.text()

    def set_text(self, text: str):
        self.text_field.setText(text)

    def selected_index(self) -> Optional[int]:
        """The selected row, or None when nothing is selected."""
        items = self.list_widget.selectedItems()
        if not items:
            return None
        return self.list_widget.row(items[0])

    def selected_value(self) -> Optional[str]:
        items = self.list_widget.selectedItems()
        return items[0].text() if items else None

    def select_index(self, index: int) -> bool:
        """Selects row `index` and scrolls to it. Out-of-range indexes are ignored."""
        if not 0 <= index < self.list_widget.count():
            return False
        self.list_widget.setCurrentRow(index)
        self.list_widget.scrollToItem(self.list_widget.item(index))
        return True

    def select_value(self, value: str) -> bool:
        """Selects the first entry equal to `value`. Leaves the selection alone if there is none."""
        for index in range(self.list_widget.count()):
            if self.list_widget.item(index).text() == value:
                return self.select_index(index)
        return False

    def state(self) -> SelectorState:
        return SelectorState(self.text(), self.selected_index(), self.options())

"""Tests for the font selector dialog."""

import pytest
from PyQt6.QtGui import QFont

from src.fontpicker.core.font_descriptor import FontDescriptor, FontStyle
from src.fontpicker.gui import font_selector_dialog
from src.fontpicker.gui.font_selector_dialog import DialogState, FontSelectorDialog, pick_font
from src.fontpicker.gui.qt_fonts import to_qfont

ARIAL_12_BOLD = FontDescriptor("Arial", 12, FontStyle.BOLD)


@pytest.fixture
def make_dialog(qapp, fake_fonts, identity):
    """Builds dialogs without showing them and disposes of them afterwards."""
    dialogs = []

    def _make(font=ARIAL_12_BOLD, **kwargs):
        kwargs.setdefault("font_enumerator", fake_fonts)
        kwargs.setdefault("translator", identity)
        dialog = FontSelectorDialog(None, font, **kwargs)
        dialogs.append(dialog)
        return dialog

    yield _make
    for dialog in dialogs:
        dialog.deleteLater()


class TestConstruction:
    """Test the initial state of the dialog."""

    def test_prepopulates_fields_and_lists(self, make_dialog):
        dialog = make_dialog(ARIAL_12_BOLD)

        assert dialog.family_panel.text() == "Arial"
        assert dialog.size_panel.text() == "12"
        assert dialog.style_panel.text() == "bold"
        assert dialog.family_panel.selected_value() == "Arial"
        assert dialog.size_panel.selected_value() == "12"
        assert dialog.style_panel.selected_index() == 1
        assert dialog.state is DialogState.OPEN

    def test_hidden_families_not_listed(self, make_dialog):
        dialog = make_dialog()
        assert dialog.family_panel.options() == ("Arial", "Courier New", "Times New Roman")

    def test_fixed_size_and_style_lists(self, make_dialog):
        dialog = make_dialog()
        assert dialog.size_panel.options() == ("9", "10", "12", "14", "16", "18", "24")
        assert dialog.style_panel.options() == ("plain", "bold", "italic", "bold-italic")

    def test_style_field_is_read_only(self, make_dialog):
        dialog = make_dialog()
        assert dialog.style_panel.text_field.isReadOnly()
        assert not dialog.size_panel.text_field.isReadOnly()
        assert not dialog.family_panel.text_field.isReadOnly()

    def test_unknown_family_fills_field_without_selection(self, make_dialog):
        dialog = make_dialog(FontDescriptor("Comic Sans MS", 12))
        assert dialog.family_panel.text() == "Comic Sans MS"
        assert dialog.family_panel.selected_index() is None

    def test_non_preset_size_fills_field_without_selection(self, make_dialog):
        dialog = make_dialog(FontDescriptor("Arial", 11))
        assert dialog.size_panel.text() == "11"
        assert dialog.size_panel.selected_index() is None

    def test_enumeration_failure_gives_empty_family_list(self, make_dialog):
        def broken():
            raise OSError("fonts unavailable")

        dialog = make_dialog(font_enumerator=broken)
        assert dialog.family_panel.options() == ()
        assert dialog.family_panel.text() == "Arial"

    def test_initial_preview(self, make_dialog):
        dialog = make_dialog(ARIAL_12_BOLD)
        font = dialog.preview.font()
        assert font.family() == "Arial"
        assert font.pointSize() == 12
        assert font.bold() and not font.italic()
        assert font.styleStrategy() == QFont.StyleStrategy.PreferAntialias

    def test_labels_go_through_translator(self, make_dialog):
        dialog = make_dialog(translator=lambda text: f"<{text}>")
        assert dialog.windowTitle() == "<Font selection>"
        assert dialog.ok_button.text() == "<OK>"
        assert dialog.cancel_button.text() == "<Cancel>"
        assert dialog.family_panel.caption_label.text() == "<Font family>"

    def test_ok_is_default_button(self, make_dialog):
        dialog = make_dialog()
        assert dialog.ok_button.isDefault()
        assert dialog.isModal()


class TestSynchronization:
    """Test list to field synchronization and preview refresh."""

    def test_selecting_family_updates_field_and_preview(self, make_dialog):
        dialog = make_dialog()
        dialog.family_panel.select_value("Courier New")

        assert dialog.family_panel.text() == "Courier New"
        assert dialog.preview.font().family() == "Courier New"

    def test_selecting_size_updates_field_and_preview(self, make_dialog):
        dialog = make_dialog()
        dialog.size_panel.select_value("24")

        assert dialog.size_panel.text() == "24"
        assert dialog.preview.font().pointSize() == 24

    def test_selecting_style_index_one_shows_bold(self, make_dialog):
        dialog = make_dialog(FontDescriptor("Arial", 12, FontStyle.PLAIN))
        assert dialog.style_panel.text() == "plain"

        dialog.style_panel.select_index(1)

        assert dialog.style_panel.text() == "bold"
        assert dialog.preview.font().bold()

        dialog.ok_button.click()
        assert dialog.get_selected_font().style is FontStyle.BOLD

    def test_editing_field_does_not_change_list(self, make_dialog):
        dialog = make_dialog()
        dialog.size_panel.set_text("16")
        dialog.family_panel.set_text("Times New Roman")

        assert dialog.size_panel.selected_value() == "12"
        assert dialog.family_panel.selected_value() == "Arial"
        # No refresh until a list selection changes.
        assert dialog.preview.font().pointSize() == 12

    def test_typed_size_applies_on_next_refresh(self, make_dialog):
        dialog = make_dialog()
        dialog.size_panel.set_text("30")
        dialog.style_panel.select_index(2)

        font = dialog.preview.font()
        assert font.pointSize() == 30
        assert font.italic() and not font.bold()

    def test_unparsable_size_previews_at_default(self, make_dialog):
        dialog = make_dialog()
        dialog.size_panel.set_text("abc")
        dialog.update_preview()
        assert dialog.preview.font().pointSize() == 14


class TestCommit:
    """Test confirm and cancel."""

    def test_confirm_with_size_14(self, make_dialog):
        dialog = make_dialog()
        dialog.size_panel.set_text("14")
        dialog.ok_button.click()

        assert dialog.state is DialogState.CONFIRMED
        assert dialog.get_selected_font() == FontDescriptor("Arial", 14, FontStyle.BOLD)

    def test_confirm_with_non_numeric_size_uses_default(self, make_dialog):
        dialog = make_dialog()
        dialog.size_panel.set_text("abc")
        dialog.ok_button.click()

        assert dialog.get_selected_font().size == 14

    def test_confirm_with_size_beyond_32_bits_uses_default(self, make_dialog):
        dialog = make_dialog()
        dialog.size_panel.set_text("3000000000")
        dialog.update_preview()
        assert dialog.preview.font().pointSize() == 14

        dialog.ok_button.click()
        selected = dialog.get_selected_font()

        assert selected.size == 14
        assert to_qfont(selected).pointSize() == 14

    def test_confirm_uses_typed_family(self, make_dialog):
        dialog = make_dialog()
        dialog.family_panel.set_text("My Custom Font")
        dialog.ok_button.click()

        assert dialog.get_selected_font().family == "My Custom Font"

    def test_cancel_gives_no_result(self, make_dialog):
        dialog = make_dialog()
        dialog.family_panel.select_value("Times New Roman")
        dialog.size_panel.set_text("18")
        dialog.cancel_button.click()

        assert dialog.state is DialogState.CANCELLED
        assert dialog.get_selected_font() is None

    def test_no_result_while_open(self, make_dialog):
        assert make_dialog().get_selected_font() is None

    def test_result_is_captured_at_confirm_time(self, make_dialog):
        dialog = make_dialog()
        dialog.ok_button.click()
        dialog.size_panel.set_text("99")

        assert dialog.get_selected_font().size == 12

    def test_confirm_after_cancel_is_ignored(self, make_dialog):
        dialog = make_dialog()
        dialog.reject()
        dialog.accept()

        assert dialog.state is DialogState.CANCELLED
        assert dialog.get_selected_font() is None

    def test_cancel_after_confirm_is_ignored(self, make_dialog):
        dialog = make_dialog()
        dialog.accept()
        dialog.reject()

        assert dialog.state is DialogState.CONFIRMED
        assert dialog.get_selected_font() == ARIAL_12_BOLD

    def test_closed_dialog_cannot_be_reopened(self, make_dialog):
        dialog = make_dialog()
        dialog.reject()
        with pytest.raises(RuntimeError):
            dialog.show_modal()

    def test_missing_style_selection_falls_back_to_plain(self, make_dialog):
        dialog = make_dialog()
        dialog.style_panel.list_widget.clearSelection()
        dialog.accept()

        assert dialog.get_selected_font().style is FontStyle.PLAIN


class TestPickFont:
    """Test the blocking helper with the event loop stubbed out."""

    def test_returns_confirmed_font(self, qapp, fake_fonts, identity, monkeypatch):
        def fake_exec(dialog):
            dialog.size_panel.select_value("18")
            dialog.accept()
            return 1

        monkeypatch.setattr(FontSelectorDialog, "exec", fake_exec)
        result = pick_font(None, ARIAL_12_BOLD, fake_fonts, identity)

        assert result == FontDescriptor("Arial", 18, FontStyle.BOLD)

    def test_returns_none_on_cancel(self, qapp, fake_fonts, identity, monkeypatch):
        def fake_exec(dialog):
            dialog.reject()
            return 0

        monkeypatch.setattr(FontSelectorDialog, "exec", fake_exec)
        assert pick_font(None, ARIAL_12_BOLD, fake_fonts, identity) is None

    def test_dialog_is_parented_to_owner_window(self, qapp, fake_fonts, identity, monkeypatch):
        from PyQt6.QtWidgets import QPushButton, QWidget

        window = QWidget()
        button = QPushButton(window)
        seen = {}

        def fake_exec(dialog):
            seen["parent"] = dialog.parentWidget()
            dialog.reject()
            return 0

        monkeypatch.setattr(FontSelectorDialog, "exec", fake_exec)
        pick_font(button, ARIAL_12_BOLD, fake_fonts, identity)

        assert seen["parent"] is window
        window.deleteLater()

    def test_uses_module_translator_by_default(self, qapp, fake_fonts, monkeypatch):
        monkeypatch.setattr(font_selector_dialog, "lang", lambda text: text.upper())
        dialog = FontSelectorDialog(None, ARIAL_12_BOLD, fake_fonts)

        assert dialog.windowTitle() == "FONT SELECTION"
        dialog.deleteLater()

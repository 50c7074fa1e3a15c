"""
pytest configuration: puts the project root on sys.path so that `from src...`
imports work, and runs Qt on the offscreen platform.
"""

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

# Must be set before the QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

FAKE_FAMILIES = [
    "Arial",
    "Courier New",
    "Dialog.bold",
    "Dialog.italic",
    "Dialog.bolditalic",
    "Times New Roman",
]


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by every GUI test."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def fake_fonts():
    """A font enumerator returning a fixed list that includes hidden entries."""
    return lambda: list(FAKE_FAMILIES)


@pytest.fixture
def identity():
    """A translator that returns message keys unchanged."""
    return lambda text: text

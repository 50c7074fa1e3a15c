"""
Prints the font families the font selector would offer on this machine.

Families reported with a hidden suffix (".bold", ".italic") are left out,
exactly as in the dialog. Run from the project root:

    python scripts/list_font_families.py
"""

import sys
from pathlib import Path

# --- Path Setup ---
# We add the project root to the Python path to allow importing from the 'src' package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from PyQt6.QtGui import QGuiApplication

from src.fontpicker.core.font_catalog import available_font_families, qt_font_families


def main():
    # The Qt font database needs a GUI application instance.
    app = QGuiApplication(sys.argv[:1])

    all_families = qt_font_families()
    families = available_font_families(lambda: all_families)

    print("Font families available to the font selector:\n")
    for i, family in enumerate(families, 1):
        print(f"{i}. {family}")

    hidden = len(all_families) - len(families)
    print(f"\nTotal: {len(families)} families ({hidden} hidden)")


if __name__ == "__main__":
    main()

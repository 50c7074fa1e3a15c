import argparse
import logging
import sys
from PyQt6.QtWidgets import QApplication

from src.fontpicker.app import FontPickerApp
from src.fontpicker.config import get_config
from src.fontpicker.l10n import set_language


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Choose the application font.")
    parser.add_argument("--language", help="User interface language, e.g. 'de'. Defaults to the config value.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv=None):
    """
    The main entry point for the FontPicker application.

    This function configures logging and localization, initializes the
    QApplication, shows the appearance window and starts the event loop.
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = get_config()
    localization = set_language(args.language or config.language, [config.app_dir])

    # Qt reads its own options from argv; pass only the program name.
    app = QApplication(sys.argv[:1])

    font_picker_app = FontPickerApp(config=config, localization=localization)
    font_picker_app.show()

    # The return value of exec() is the exit code.
    sys.exit(app.exec())


if __name__ == '__main__':
    main()

# -*- coding: utf-8 -*-
"""
src/fontpicker/l10n.py

Message lookup for the user interface.

Widgets never hold a Localization object; they receive its `lang` method as a
plain `text -> text` callable, which keeps them testable with a stub.

English is the identity mapping. German is built in. Any other language is
read from `<dir>/<language>.ini`, a file with a single `[Messages]` section:

    [Messages]
    Font family = Police
    OK = OK
"""

import configparser
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]

DEFAULT_LANGUAGE = "en"
MESSAGES_SECTION = "Messages"

_BUILTIN_MESSAGES: Dict[str, Dict[str, str]] = {
    "de": {
        "Font selection": "Schriftauswahl",
        "Font family": "Schriftart",
        "Font size": "Schriftgröße",
        "Font style": "Schriftstil",
        "Font preview": "Schriftvorschau",
        "OK": "OK",
        "Cancel": "Abbrechen",
        "Appearance": "Erscheinungsbild",
        "Select font": "Schrift wählen",
        "Current font: %0": "Aktuelle Schrift: %0",
    },
}


class Localization:
    """
    Maps message keys to display text for one language.

    Attributes:
        language (str): The active language code, e.g. 'en' or 'de'.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, search_dirs: Optional[Iterable[Path]] = None):
        self.language = language
        self.search_dirs = [Path(d) for d in (search_dirs or [])]
        self._messages: Dict[str, str] = self._load_messages()

    def _load_messages(self) -> Dict[str, str]:
        if self.language == DEFAULT_LANGUAGE:
            return {}

        messages = dict(_BUILTIN_MESSAGES.get(self.language, {}))
        for directory in self.search_dirs:
            messages.update(self._read_messages_file(directory / f"{self.language}.ini"))

        if not messages:
            logger.warning(f"No translations found for language '{self.language}', using English.")
        return messages

    @staticmethod
    def _read_messages_file(path: Path) -> Dict[str, str]:
        if not path.exists():
            return {}
        # Keys may contain ':', so only '=' separates key from value.
        parser = configparser.ConfigParser(interpolation=None, delimiters=("=",))
        # Message keys are case-sensitive.
        parser.optionxform = str
        try:
            parser.read(path, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            logger.error(f"Could not read translation file '{path}': {e}")
            return {}
        if not parser.has_section(MESSAGES_SECTION):
            logger.warning(f"Translation file '{path}' has no [{MESSAGES_SECTION}] section.")
            return {}
        logger.info(f"Loaded translations from '{path}'.")
        return dict(parser.items(MESSAGES_SECTION))

    def lang(self, key: str, *params: str) -> str:
        """
        Translates a message key.

        Unknown keys are returned unchanged. Placeholders `%0`, `%1`, ... in
        the translated text are replaced by the corresponding parameters.
        """
        text = self._messages.get(key, key)
        # Highest index first so that %1 does not clobber the start of %10.
        for index in reversed(range(len(params))):
            text = text.replace(f"%{index}", str(params[index]))
        return text


_localization: Optional[Localization] = None


def get_localization() -> Localization:
    """Returns the process-wide Localization, creating an English one on first use."""
    global _localization
    if _localization is None:
        _localization = Localization()
    return _localization


def set_language(language: str, search_dirs: Optional[Iterable[Path]] = None) -> Localization:
    """Replaces the process-wide Localization with one for `language`."""
    global _localization
    _localization = Localization(language, search_dirs)
    logger.info(f"User interface language set to '{language}'.")
    return _localization


def lang(key: str, *params: str) -> str:
    """Translates `key` with the process-wide Localization."""
    return get_localization().lang(key, *params)

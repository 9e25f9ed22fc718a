# i18n/translator.py

import logging

from i18n.translations import DEFAULT_LANGUAGE, TRANSLATIONS

logger = logging.getLogger(__name__)


class Translator:
    """
    Active language + lookup for one browser.

    The table itself is shared and read-only; only the language selection
    is per instance.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, table: dict | None = None):
        self.table = table if table is not None else TRANSLATIONS
        self.language = DEFAULT_LANGUAGE
        self.set_language(language)

    def set_language(self, code: str) -> str:
        code = (code or "").strip().lower()
        if code not in self.table:
            logger.info("Unknown language %r, using %s", code, DEFAULT_LANGUAGE)
            code = DEFAULT_LANGUAGE
        self.language = code
        return code

    def t(self, key: str) -> str:
        return self.table.get(self.language, {}).get(key, key)

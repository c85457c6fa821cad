from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache

from babel.core import Locale, UnknownLocaleError

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_LOCALE = "it"
MISSING_LANGUAGE_LABEL = "-"


def _load_language_names(locale: str) -> Mapping[str, str] | None:
    try:
        return Locale.parse(locale).languages
    except (UnknownLocaleError, ValueError, TypeError):
        logger.warning("no language names for display locale %r", locale)
        return None


class LanguageLabelResolver:
    """Looks up human-readable language names in one display locale.

    The locale data is checked once at construction; when it is unavailable
    every lookup simply returns None.
    """

    def __init__(self, locale: str = DEFAULT_DISPLAY_LOCALE) -> None:
        self.locale = locale
        self._names = _load_language_names(locale)

    @property
    def available(self) -> bool:
        return self._names is not None

    def lookup(self, code: str) -> str | None:
        if self._names is None or not code:
            return None
        name = self._names.get(code) or self._names.get(code.lower())
        if not isinstance(name, str) or not name:
            return None
        return name

    def label(self, code: str | None) -> str:
        if not isinstance(code, str) or not code:
            return MISSING_LANGUAGE_LABEL

        name = self.lookup(code)
        if name is None:
            return code.upper()
        # CLDR names are lower-case in most Romance locales ("inglese").
        return name[0].upper() + name[1:]


@lru_cache(maxsize=8)
def get_language_resolver(locale: str = DEFAULT_DISPLAY_LOCALE) -> LanguageLabelResolver:
    return LanguageLabelResolver(locale)


def resolve_language_label(code: str | None, locale: str = DEFAULT_DISPLAY_LOCALE) -> str:
    return get_language_resolver(locale).label(code)

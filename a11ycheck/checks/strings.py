"""
Locale catalog used to render check titles and result messages.

Checks never look strings up on their own: every rendering call receives a
`StringCatalog`. `MappingStringCatalog` is an in-memory implementation backed
by plain dictionaries, with `DEFAULT_STRINGS` holding the English table for the
built-in checks and question handlers.
"""

import logging
from typing import Mapping
from typing import Protocol

from a11ycheck.settings import get_default_locale

logger = logging.getLogger(__name__)


class MissingStringError(LookupError):
    """Raised when a catalog has no string for a key in the requested or fallback locales."""

    def __init__(self, locale: str, key: str):
        super().__init__(f"No string '{key}' for locale '{locale}'")
        self.locale = locale
        self.key = key


class StringCatalog(Protocol):
    def lookup(self, locale: str, key: str) -> str: ...


DEFAULT_STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "result_message_not_visible": "View is not visible.",
        "result_message_not_important_for_accessibility": "View is not important for accessibility.",
        "result_message_class_name_is_unknown": "View does not have a class name.",
        "result_message_class_name_is_empty": "View has an empty class name.",
        "result_message_class_name_not_supported_detail": (
            "Accessibility services may not recognize this view's type, {0}, "
            "and may not announce it correctly. Consider extending a standard "
            "UI class, or setting an accessibility class name."
        ),
        "result_message_class_name_not_supported_brief": (
            "This item may not be announced correctly by accessibility services."
        ),
        "check_title_class_name_not_supported": "Unsupported item type",
        "question_message_is_custom_view_accessible": (
            "Does the custom view {0} expose its role and state to accessibility services?"
        ),
    },
}


class MappingStringCatalog:
    """
    Catalog backed by a mapping of locale -> {key: string}.

    Lookup tries the exact locale, then its language (``fr_CA`` -> ``fr``),
    then the default locale.
    """

    def __init__(
        self,
        tables: Mapping[str, Mapping[str, str]],
        default_locale: str | None = None,
    ):
        self._tables = {
            _normalize(locale): dict(table) for locale, table in tables.items()
        }
        self.default_locale = _normalize(default_locale or get_default_locale())

    def _candidates(self, locale: str) -> list[str]:
        normalized = _normalize(locale)
        candidates = [normalized]
        language = normalized.split("_", 1)[0]
        if language not in candidates:
            candidates.append(language)
        if self.default_locale not in candidates:
            candidates.append(self.default_locale)
        return candidates

    def lookup(self, locale: str, key: str) -> str:
        for candidate in self._candidates(locale):
            table = self._tables.get(candidate)
            if table is not None and key in table:
                if candidate != _normalize(locale):
                    logger.debug(
                        "String '%s' not found for '%s', using '%s'",
                        key,
                        locale,
                        candidate,
                    )
                return table[key]
        raise MissingStringError(locale, key)

    @property
    def locales(self) -> list[str]:
        return sorted(self._tables)


def _normalize(locale: str) -> str:
    return locale.replace("-", "_").lower()


def default_catalog() -> MappingStringCatalog:
    return MappingStringCatalog(DEFAULT_STRINGS)

# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Localization helpers

Tag labels, descriptions and enumerated values are stored untranslated in
the tag tables. A translator is any callable taking the English string and
returning its localized form (or the input unchanged). Translators are passed
explicitly to the render functions; nothing here is global state.

Copyright 2025 DNAi inc.
"""

import gettext
from typing import Callable, Dict, Mapping, Optional, Sequence

Translator = Callable[[str], str]


def N_(text: str) -> str:
    """Mark a table literal as translatable without translating it."""
    return text


def null_translator(text: str) -> str:
    """Identity translator used when no localization is configured."""
    return text


class CatalogTranslator:
    """
    Translator backed by an in-memory message catalog.

    Useful for tests and for applications that ship their own string tables.
    """

    def __init__(self, catalog: Mapping[str, str]):
        """
        Args:
            catalog: Mapping from English message to translated message
        """
        self._catalog: Dict[str, str] = dict(catalog)

    def __call__(self, text: str) -> str:
        return self._catalog.get(text, text)


class GettextTranslator:
    """
    Translator backed by a compiled gettext catalog (.mo files).

    A missing catalog is not an error: lookups then return the input string.
    """

    def __init__(
        self,
        domain: str = 'mnexif',
        localedir: Optional[str] = None,
        languages: Optional[Sequence[str]] = None
    ):
        """
        Args:
            domain: gettext domain name
            localedir: Directory containing <lang>/LC_MESSAGES/<domain>.mo
            languages: Languages to try, in order (defaults to the environment)
        """
        self._translations = gettext.translation(
            domain,
            localedir=localedir,
            languages=list(languages) if languages else None,
            fallback=True,
        )

    def __call__(self, text: str) -> str:
        return self._translations.gettext(text)

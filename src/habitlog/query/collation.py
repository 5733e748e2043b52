# SPDX-License-Identifier: MIT

from functools import lru_cache
from typing import Any, Callable

import icu
from pyuca import Collator

type CollationKey = Callable[[str], Any]

DEFAULT_COLLATION_LOCALE = "ja"

CODEPOINT_LOCALES = frozenset({"C", "POSIX", "codepoint"})
UCA_LOCALES = frozenset({"root", "uca"})


@lru_cache(maxsize=1)
def _uca_collator() -> Collator:
    return Collator()


def uca_key(text: str) -> tuple[int, ...]:
    """Unicode Collation Algorithm sort key (DUCET root ordering)."""
    return _uca_collator().sort_key(text)


def codepoint_key(text: str) -> str:
    return text


@lru_cache(maxsize=None)
def locale_key(locale: str) -> CollationKey:
    """
    Sort-key function for the ICU collation of ``locale``.

    Under "ja" kanji follow JIS X 0208 reading order and kana follow gojuon.
    """
    collator = icu.Collator.createInstance(icu.Locale(locale))
    return collator.getSortKey


def get_collation_key(locale: str = DEFAULT_COLLATION_LOCALE) -> CollationKey:
    """
    Resolve a collation locale identifier to a sort-key function.

    "C", "POSIX" and "codepoint" give raw code-point ordering, "root" and
    "uca" give untailored UCA ordering. Every other identifier is handed to
    ICU as a locale.
    """
    if locale in CODEPOINT_LOCALES:
        return codepoint_key
    if locale in UCA_LOCALES:
        return uca_key
    return locale_key(locale)

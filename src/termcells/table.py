"""Codepoint classification and per-unit width lookup.

Every codepoint falls into exactly one :class:`CodepointClass`. General
categories come from :mod:`unicodedata`; the Wide/Fullwidth decision comes from
the generated East-Asian width table bundled with ``wcwidth`` for the edition
returned by :func:`termcells.config.unicode_version`.
"""

from __future__ import annotations

import enum
import unicodedata
from functools import lru_cache

import wcwidth as _wcwidth

from termcells.config import unicode_version


class CodepointClass(enum.Enum):
    BASE = "base"
    COMBINING_MARK = "combining_mark"
    ZERO_WIDTH_OTHER = "zero_width_other"


_MARK_CATEGORIES = frozenset({"Mn", "Mc", "Me"})
_ZERO_WIDTH_CATEGORIES = frozenset({"Cc", "Cf"})

# Variation selectors VS1..VS16 and VS17..VS256
_VARIATION_SELECTORS = ((0xFE00, 0xFE0F), (0xE0100, 0xE01EF))


def is_variation_selector(cp: int) -> bool:
    for lo, hi in _VARIATION_SELECTORS:
        if lo <= cp <= hi:
            return True
    return False


@lru_cache(maxsize=4096)
def classify(ch: str) -> CodepointClass:
    """Classify a single codepoint.

    Variation selectors are checked before the Mark categories so they are
    tagged ``ZERO_WIDTH_OTHER`` even though Unicode files them under Mn.
    Unpaired surrogates (Cs) are ``BASE``.
    """
    if is_variation_selector(ord(ch)):
        return CodepointClass.ZERO_WIDTH_OTHER
    category = unicodedata.category(ch)
    if category in _MARK_CATEGORIES:
        return CodepointClass.COMBINING_MARK
    if category in _ZERO_WIDTH_CATEGORIES:
        return CodepointClass.ZERO_WIDTH_OTHER
    return CodepointClass.BASE


@lru_cache(maxsize=4096)
def _is_wide(ch: str, version: str) -> bool:
    # wcwidth reports 2 exactly for East_Asian_Width W and F
    return _wcwidth.wcwidth(ch, unicode_version=version) == 2


def is_wide(ch: str) -> bool:
    """Return ``True`` if *ch* is East-Asian Wide or Fullwidth."""
    if unicodedata.category(ch) == "Cs":
        return False
    return _is_wide(ch, unicode_version())


def unit_width(lead: str) -> int:
    """Return the column width of a unit whose first codepoint is *lead*.

    Trailing codepoints of a unit never add width, so only the lead matters.
    """
    if classify(lead) is not CodepointClass.BASE:
        return 0
    return 2 if is_wide(lead) else 1


def clear_caches() -> None:
    classify.cache_clear()
    _is_wide.cache_clear()

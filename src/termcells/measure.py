"""Display width measurement for styled characters and plain text."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from termcells.config import unicode_version
from termcells.segmenter import segment
from termcells.types import StyledCharacter

# ---------------------------------------------------------------------------
# measure
# ---------------------------------------------------------------------------


def measure(chars: Iterable[StyledCharacter]) -> int:
    """Return the total column width of *chars*."""
    return sum(c.width for c in chars)


@lru_cache(maxsize=512)
def _measure_cached(version: str, text: str) -> int:
    # Keyed by table edition as well as text.
    return measure(segment(text))


def measure_text(text: str) -> int:
    """Return the column width of *text*.

    Uses a fast path for printable ASCII and caches results for other strings.
    """
    if not text:
        return 0

    if text.isascii() and text.isprintable():
        return len(text)

    return _measure_cached(unicode_version(), text)


def widest_line(text: str) -> int:
    """Return the width of the widest ``\\n``-separated line of *text*."""
    return max(measure_text(line) for line in text.split("\n"))

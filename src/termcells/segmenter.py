"""Styled-character segmentation.

Splits text into :class:`~termcells.types.StyledCharacter` units. A base
codepoint opens a unit; combining marks and other zero-width codepoints join
the unit that is currently open. Style comes from an interval map of
:class:`~termcells.types.StyleSpan` values kept beside the text.
"""

from __future__ import annotations

import bisect
from typing import Any, Iterable

from termcells.table import CodepointClass, classify, unit_width
from termcells.types import StyledCharacter, StyleSpan


# ---------------------------------------------------------------------------
# Style interval map
# ---------------------------------------------------------------------------


class StyleMap:
    """Non-overlapping, sorted intervals of style.

    Spans are painted in order: a later span replaces whatever part of the
    earlier spans it covers. Offsets that no span covers map to ``None``.
    """

    def __init__(self, spans: Iterable[StyleSpan] = ()) -> None:
        self._starts: list[int] = []
        self._spans: list[StyleSpan] = []
        for span in spans:
            self.paint(span)

    @property
    def spans(self) -> list[StyleSpan]:
        return list(self._spans)

    def __bool__(self) -> bool:
        return bool(self._spans)

    def paint(self, span: StyleSpan) -> None:
        if span.start < 0 or span.end < span.start:
            raise ValueError(
                f"Invalid style span [{span.start}, {span.end})"
            )
        if span.start == span.end:
            return

        lo = bisect.bisect_right(self._starts, span.start)
        if lo > 0 and self._spans[lo - 1].end > span.start:
            lo -= 1
        hi = bisect.bisect_left(self._starts, span.end)

        replaced = self._spans[lo:hi]
        pieces: list[StyleSpan] = []
        if replaced and replaced[0].start < span.start:
            first = replaced[0]
            pieces.append(StyleSpan(first.start, span.start, first.style))
        pieces.append(span)
        if replaced and replaced[-1].end > span.end:
            last = replaced[-1]
            pieces.append(StyleSpan(span.end, last.end, last.style))

        self._spans[lo:hi] = pieces
        self._starts[lo:hi] = [p.start for p in pieces]

    def style_at(self, offset: int) -> Any:
        i = bisect.bisect_right(self._starts, offset) - 1
        if i >= 0 and offset < self._spans[i].end:
            return self._spans[i].style
        return None


# ---------------------------------------------------------------------------
# segment
# ---------------------------------------------------------------------------


def segment(
    text: str,
    spans: Iterable[StyleSpan] | None = None,
) -> list[StyledCharacter]:
    """Split *text* into styled display units.

    * A leading mark with no base before it becomes its own zero-width unit.
    * The style at a unit's first codepoint applies to the whole unit.
    * Lone surrogates are ordinary one-column units.
    """
    style_map = StyleMap(spans or ())
    result: list[StyledCharacter] = []

    parts: list[str] = []
    style: Any = None

    for offset, ch in enumerate(text):
        if parts and classify(ch) is not CodepointClass.BASE:
            parts.append(ch)
            continue

        if parts:
            result.append(_make_unit(parts, style))
        parts = [ch]
        style = style_map.style_at(offset) if style_map else None

    if parts:
        result.append(_make_unit(parts, style))

    return result


def _make_unit(parts: list[str], style: Any) -> StyledCharacter:
    return StyledCharacter(
        value="".join(parts),
        width=unit_width(parts[0]),
        style=style,
    )

"""Line wrapping and truncation at styled-character granularity.

Units are never divided: a base character and its marks always land on the
same line. Any unit boundary is a legal break, so scripts written without
spaces (Thai, for one) wrap the same way as everything else.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Literal

from termcells.measure import measure
from termcells.segmenter import segment
from termcells.types import Line, StyledCharacter, StyleSpan, check_max_width

logger = logging.getLogger(__name__)

TruncatePosition = Literal["end", "start", "middle"]


# ---------------------------------------------------------------------------
# wrap
# ---------------------------------------------------------------------------


def wrap(chars: Iterable[StyledCharacter], max_width: int) -> list[Line]:
    """Greedily pack *chars* into lines at most *max_width* columns wide.

    A unit wider than *max_width* on its own is placed alone on a line and
    overflows it. Empty input gives a single empty line.

    Raises :class:`~termcells.types.InvalidWidthError` if *max_width* is not a
    positive integer.
    """
    check_max_width(max_width)

    lines: list[Line] = []
    current: list[StyledCharacter] = []
    line_width = 0

    for c in chars:
        if current and line_width + c.width > max_width:
            lines.append(Line(tuple(current)))
            current = []
            line_width = 0

        if not current and c.width > max_width:
            logger.debug(
                "Unit %r is %d columns wide, over the %d column limit",
                c.value,
                c.width,
                max_width,
            )

        current.append(c)
        line_width += c.width

    lines.append(Line(tuple(current)))
    return lines


def wrap_text(
    text: str,
    max_width: int,
    spans: Iterable[StyleSpan] | None = None,
) -> list[Line]:
    """Wrap *text*, treating each ``\\n`` as a hard break.

    The last line of every physical line but the final one has
    ``hard_break`` set; the newline itself belongs to no line. Appending
    ``"\\n"`` to each hard-broken line and joining all line texts gives *text*
    back. Span offsets refer to positions in the whole of *text*.
    """
    check_max_width(max_width)
    span_list = list(spans) if spans is not None else []

    result: list[Line] = []
    offset = 0
    physical_lines = text.split("\n")
    for index, physical_line in enumerate(physical_lines):
        line_spans = _clip_spans(span_list, offset, len(physical_line))
        lines = wrap(segment(physical_line, line_spans), max_width)
        if index < len(physical_lines) - 1:
            lines[-1] = replace(lines[-1], hard_break=True)
        result.extend(lines)
        offset += len(physical_line) + 1

    return result


def _clip_spans(spans: list[StyleSpan], offset: int, length: int) -> list[StyleSpan]:
    """Return *spans* clipped to ``[offset, offset + length)`` and rebased to 0."""
    end = offset + length
    clipped: list[StyleSpan] = []
    for span in spans:
        if span.start < 0 or span.end < span.start:
            raise ValueError(f"Invalid style span [{span.start}, {span.end})")
        start = max(span.start, offset)
        stop = min(span.end, end)
        if start < stop:
            clipped.append(StyleSpan(start - offset, stop - offset, span.style))
    return clipped


# ---------------------------------------------------------------------------
# truncate
# ---------------------------------------------------------------------------


def truncate(
    chars: Iterable[StyledCharacter],
    max_width: int,
    position: TruncatePosition = "end",
    ellipsis: str = "\u2026",
) -> Line:
    """Cut *chars* down to *max_width* columns, marking the cut with *ellipsis*.

    Units are dropped from the end, the start or the middle depending on
    *position*. Input that already fits is returned unchanged. If the ellipsis
    alone is wider than *max_width* it is left out.
    """
    check_max_width(max_width)
    if position not in ("end", "start", "middle"):
        raise ValueError(f"Unknown truncation position: {position!r}")

    units = list(chars)
    if measure(units) <= max_width:
        return Line(tuple(units))

    marker = segment(ellipsis)
    budget = max_width - measure(marker)
    if budget < 0:
        logger.debug(
            "Ellipsis %r does not fit in %d columns; truncating without it",
            ellipsis,
            max_width,
        )
        marker = []
        budget = max_width

    if position == "end":
        head = _take(units, budget)
        return Line(tuple(head + marker))

    if position == "start":
        tail = _take(reversed(units), budget)
        tail.reverse()
        return Line(tuple(marker + tail))

    head = _take(units, budget - budget // 2)
    tail = _take(reversed(units), budget - measure(head))
    tail.reverse()
    return Line(tuple(head + marker + tail))


def _take(units: Iterable[StyledCharacter], budget: int) -> list[StyledCharacter]:
    """Return the leading units of *units* that fit in *budget* columns."""
    taken: list[StyledCharacter] = []
    used = 0
    for c in units:
        if used + c.width > budget:
            break
        taken.append(c)
        used += c.width
    return taken

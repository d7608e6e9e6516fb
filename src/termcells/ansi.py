"""Turn ANSI-coloured strings into plain text plus style spans.

Escape sequences are removed from the text. SGR (Select Graphic Rendition)
state is tracked while scanning, and every run of text drawn under a non-empty
SGR state becomes a :class:`~termcells.types.StyleSpan`. The span's style is
the string of SGR sequences that re-create the state, treated as opaque by the
rest of the package.
"""

from __future__ import annotations

from termcells.segmenter import segment
from termcells.types import StyledCharacter, StyleSpan


# ---------------------------------------------------------------------------
# extract_ansi_code
# ---------------------------------------------------------------------------

_CSI_FINAL = "mGKHJ"
_CSI_PARAMS = "0123456789;"


def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Extract an escape sequence starting at *pos* in *text*.

    Returns ``(code, length)`` or ``None`` if no sequence starts at *pos*.

    Handles:
    * CSI sequences: ``ESC[`` <digits and ``;``> ``m`` / ``G`` / ``K`` / ``H`` / ``J``
    * OSC sequences (OSC 8 hyperlinks among them): ``ESC]`` ... ``BEL`` / ``ST``
    * APC sequences: ``ESC_`` ... ``BEL`` / ``ST``
    """
    if pos + 1 >= len(text) or text[pos] != "\x1b":
        return None

    introducer = text[pos + 1]

    if introducer == "[":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch in _CSI_FINAL:
                return (text[pos : i + 1], i + 1 - pos)
            if ch not in _CSI_PARAMS:
                return None
            i += 1
        return None

    if introducer in "]_":
        i = pos + 2
        while i < len(text):
            if text[i] == "\x07":  # BEL
                return (text[pos : i + 1], i + 1 - pos)
            if text.startswith("\x1b\\", i):  # ST
                return (text[pos : i + 2], i + 2 - pos)
            i += 1
        return None

    return None


# ---------------------------------------------------------------------------
# SgrState
# ---------------------------------------------------------------------------

_ATTRIBUTE_ON = {
    1: "bold",
    2: "dim",
    3: "italic",
    4: "underline",
    5: "blink",
    7: "inverse",
    8: "hidden",
    9: "strikethrough",
}

_ATTRIBUTE_OFF = {
    22: ("bold", "dim"),
    23: ("italic",),
    24: ("underline",),
    25: ("blink",),
    27: ("inverse",),
    28: ("hidden",),
    29: ("strikethrough",),
    39: ("fg",),
    49: ("bg",),
}

_SLOT_ORDER = (*_ATTRIBUTE_ON.values(), "fg", "bg")


class SgrState:
    """Active SGR attributes, updated one escape sequence at a time."""

    def __init__(self) -> None:
        self._active: dict[str, str] = {}

    def process(self, code: str) -> None:
        """Update the state from a sequence like ``\\x1b[1;31m``.

        Sequences other than SGR are ignored.
        """
        if not code.startswith("\x1b[") or not code.endswith("m"):
            return

        params = [int(p) if p else 0 for p in code[2:-1].split(";")]
        i = 0
        while i < len(params):
            val = params[i]
            if val == 0:
                self.clear()
            elif val in _ATTRIBUTE_ON:
                self._active[_ATTRIBUTE_ON[val]] = str(val)
            elif val in _ATTRIBUTE_OFF:
                for slot in _ATTRIBUTE_OFF[val]:
                    self._active.pop(slot, None)
            elif 30 <= val <= 37 or 90 <= val <= 97:
                self._active["fg"] = str(val)
            elif 40 <= val <= 47 or 100 <= val <= 107:
                self._active["bg"] = str(val)
            elif val in (38, 48):
                slot = "fg" if val == 38 else "bg"
                color, consumed = _extended_color(params, i)
                if color is not None:
                    self._active[slot] = color
                i += consumed
            i += 1

    def clear(self) -> None:
        self._active.clear()

    def active_codes(self) -> str:
        """Return the SGR sequences that re-create the current state."""
        return "".join(
            f"\x1b[{self._active[slot]}m"
            for slot in _SLOT_ORDER
            if slot in self._active
        )

    def __bool__(self) -> bool:
        return bool(self._active)


def _extended_color(params: list[int], i: int) -> tuple[str | None, int]:
    """Decode a 256-colour or RGB colour starting at ``params[i]`` (38 or 48).

    Returns the colour's parameter string and how many parameters after
    ``params[i]`` it used.
    """
    if i + 1 >= len(params):
        return (None, 0)
    mode = params[i + 1]
    if mode == 5 and i + 2 < len(params):
        return (f"{params[i]};5;{params[i + 2]}", 2)
    if mode == 2 and i + 4 < len(params):
        r, g, b = params[i + 2 : i + 5]
        return (f"{params[i]};2;{r};{g};{b}", 4)
    return (None, 1)


# ---------------------------------------------------------------------------
# parse_ansi / segment_ansi
# ---------------------------------------------------------------------------


def parse_ansi(text: str) -> tuple[str, list[StyleSpan]]:
    """Split *text* into plain text and the style spans its SGR codes describe."""
    state = SgrState()
    plain: list[str] = []
    spans: list[StyleSpan] = []
    run_start = 0
    run_style: str | None = None

    i = 0
    while i < len(text):
        extracted = extract_ansi_code(text, i)
        if extracted is not None:
            code, length = extracted
            state.process(code)
            i += length
            continue

        style = state.active_codes() or None
        if style != run_style:
            if run_style is not None:
                spans.append(StyleSpan(run_start, len(plain), run_style))
            run_start = len(plain)
            run_style = style

        plain.append(text[i])
        i += 1

    if run_style is not None and len(plain) > run_start:
        spans.append(StyleSpan(run_start, len(plain), run_style))

    return ("".join(plain), spans)


def segment_ansi(text: str) -> list[StyledCharacter]:
    """Segment ANSI-coloured *text*, carrying each unit's SGR state as its style."""
    plain, spans = parse_ansi(text)
    return segment(plain, spans)

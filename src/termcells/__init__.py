"""termcells: terminal cell widths and mark-safe wrapping for Unicode text."""

# ANSI input
from termcells.ansi import SgrState, extract_ansi_code, parse_ansi, segment_ansi

# Configuration
from termcells.config import reset_config_cache, unicode_version

# Measurement
from termcells.measure import measure, measure_text, widest_line

# Segmentation
from termcells.segmenter import StyleMap, segment

# Classification
from termcells.table import CodepointClass, classify, unit_width

# Value types
from termcells.types import InvalidWidthError, Line, StyledCharacter, StyleSpan

# Wrapping
from termcells.wrap import truncate, wrap, wrap_text

__all__ = [
    # ANSI input
    "SgrState",
    "extract_ansi_code",
    "parse_ansi",
    "segment_ansi",
    # Configuration
    "reset_config_cache",
    "unicode_version",
    # Measurement
    "measure",
    "measure_text",
    "widest_line",
    # Segmentation
    "StyleMap",
    "segment",
    # Classification
    "CodepointClass",
    "classify",
    "unit_width",
    # Value types
    "InvalidWidthError",
    "Line",
    "StyleSpan",
    "StyledCharacter",
    # Wrapping
    "truncate",
    "wrap",
    "wrap_text",
]

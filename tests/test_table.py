"""Tests for termcells.table -- codepoint classification and unit width."""

from __future__ import annotations

from termcells.table import CodepointClass, classify, is_wide, unit_width


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    """Every codepoint falls into exactly one class."""

    def test_latin_letter_is_base(self) -> None:
        assert classify("a") is CodepointClass.BASE

    def test_space_is_base(self) -> None:
        assert classify(" ") is CodepointClass.BASE

    def test_combining_acute_is_mark(self) -> None:
        assert classify("\u0301") is CodepointClass.COMBINING_MARK

    def test_thai_vowel_sign_is_mark(self) -> None:
        # THAI CHARACTER SARA I (Mn)
        assert classify("\u0e34") is CodepointClass.COMBINING_MARK

    def test_thai_sara_am_is_base(self) -> None:
        # SARA AM is Lo, not a mark, and takes its own column.
        assert classify("\u0e33") is CodepointClass.BASE

    def test_spacing_mark_is_mark(self) -> None:
        # DEVANAGARI VOWEL SIGN AA (Mc)
        assert classify("\u093e") is CodepointClass.COMBINING_MARK

    def test_enclosing_mark_is_mark(self) -> None:
        # COMBINING ENCLOSING CIRCLE (Me)
        assert classify("\u20dd") is CodepointClass.COMBINING_MARK

    def test_arabic_fatha_is_mark(self) -> None:
        assert classify("\u064e") is CodepointClass.COMBINING_MARK

    def test_hebrew_point_is_mark(self) -> None:
        assert classify("\u05b8") is CodepointClass.COMBINING_MARK

    def test_zero_width_joiner_is_zero_width_other(self) -> None:
        assert classify("\u200d") is CodepointClass.ZERO_WIDTH_OTHER

    def test_zero_width_space_is_zero_width_other(self) -> None:
        assert classify("\u200b") is CodepointClass.ZERO_WIDTH_OTHER

    def test_control_character_is_zero_width_other(self) -> None:
        assert classify("\n") is CodepointClass.ZERO_WIDTH_OTHER
        assert classify("\x1b") is CodepointClass.ZERO_WIDTH_OTHER

    def test_variation_selectors_are_zero_width_other(self) -> None:
        assert classify("\ufe0f") is CodepointClass.ZERO_WIDTH_OTHER
        assert classify("\ufe00") is CodepointClass.ZERO_WIDTH_OTHER
        assert classify("\U000e0100") is CodepointClass.ZERO_WIDTH_OTHER

    def test_lone_surrogate_is_base(self) -> None:
        assert classify("\ud800") is CodepointClass.BASE

    def test_private_use_is_base(self) -> None:
        assert classify("\ue000") is CodepointClass.BASE


# ---------------------------------------------------------------------------
# is_wide / unit_width
# ---------------------------------------------------------------------------


class TestUnitWidth:
    """Column width is decided by a unit's first codepoint."""

    def test_ascii_is_one(self) -> None:
        assert unit_width("a") == 1

    def test_cjk_ideograph_is_two(self) -> None:
        assert is_wide("\u4e16")
        assert unit_width("\u4e16") == 2

    def test_fullwidth_form_is_two(self) -> None:
        # FULLWIDTH LATIN CAPITAL LETTER A
        assert unit_width("\uff21") == 2

    def test_hangul_syllable_is_two(self) -> None:
        assert unit_width("\uac00") == 2

    def test_emoji_is_two(self) -> None:
        assert unit_width("\U0001f600") == 2

    def test_ambiguous_width_is_one(self) -> None:
        # GREEK SMALL LETTER ALPHA is East-Asian Ambiguous.
        assert unit_width("\u03b1") == 1

    def test_thai_arabic_hebrew_bases_are_one(self) -> None:
        assert unit_width("\u0e01") == 1
        assert unit_width("\u0645") == 1
        assert unit_width("\u05e9") == 1

    def test_orphan_mark_is_zero(self) -> None:
        assert unit_width("\u0301") == 0

    def test_format_character_is_zero(self) -> None:
        assert unit_width("\u200b") == 0

    def test_lone_surrogate_is_one(self) -> None:
        assert not is_wide("\udc00")
        assert unit_width("\udc00") == 1

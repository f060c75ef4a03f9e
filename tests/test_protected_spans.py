"""Tests for the protected-span codec."""

import pytest

from sentsplit.engines import ProtectedSpanCodec
from sentsplit.engines.protected_spans import MASK_CHARS

DOT = MASK_CHARS["."]
EXCL = MASK_CHARS["!"]
QUES = MASK_CHARS["?"]


@pytest.fixture
def codec():
    return ProtectedSpanCodec()


@pytest.mark.parametrize("text", [
    "",
    "Dr. Smith arrived. He left.",
    'He said "this is wrong." Then he left.',
    "The score was 3.5 points. Good job.",
    "He left (at 5 p.m. sharp!) and slept. Then he woke?",
    "Items: 1. Apples 2. Pears. Done!",
    "No punctuation at all",
])
def test_unmask_restores_original(codec, text):
    """Masking followed by unmasking is lossless."""
    masked = codec.mask(text)
    assert len(masked.text) == len(text)
    assert codec.unmask(masked.text) == text


class TestQuotes:
    """Tests for quoted spans."""

    def test_final_mark_inside_double_quotes_stays(self, codec):
        masked = codec.mask('"Stop! Now."')
        assert masked.text == f'"Stop{EXCL} Now."'

    def test_inner_marks_inside_double_quotes_are_masked(self, codec):
        masked = codec.mask('She asked "why? how" twice.')
        assert masked.text == f'She asked "why{QUES} how" twice.'

    def test_single_quotes_follow_same_rule(self, codec):
        masked = codec.mask("He wrote 'a.b.c' here.")
        assert masked.text == f"He wrote 'a{DOT}b{DOT}c' here."

    def test_single_character_quote_is_ignored(self, codec):
        masked = codec.mask("Use '.' here")
        assert masked.text == "Use '.' here"
        assert masked.substitutions == {}


def test_parenthetical_marks_always_masked(codec):
    masked = codec.mask("He left (really! truly.) then.")
    assert masked.text == f"He left (really{EXCL} truly{DOT}) then."


class TestAbbreviations:
    """Tests for abbreviation protection."""

    def test_abbreviation_period_masked(self, codec):
        masked = codec.mask("Dr. Smith arrived.")
        assert masked.text == f"Dr{DOT} Smith arrived."
        assert masked.substitutions == {2: "."}
        assert masked.is_abbreviation_start(0)

    def test_case_insensitive(self, codec):
        masked = codec.mask("see ETC. and more")
        assert masked.text == f"see ETC{DOT} and more"
        assert masked.is_abbreviation_start(4)

    def test_all_periods_of_multi_dot_abbreviation(self, codec):
        masked = codec.mask("in the U.S. today")
        assert masked.text == f"in the U{DOT}S{DOT} today"

    def test_word_boundary_required(self, codec):
        # "Dr." inside "Audr." is not an abbreviation
        masked = codec.mask("Audr. went home")
        assert masked.text == "Audr. went home"

    def test_custom_list(self):
        codec = ProtectedSpanCodec(["Fig."])
        masked = codec.mask("Dr. Who saw Fig. 3")
        assert masked.text == f"Dr. Who saw Fig{DOT} 3"


class TestNumbers:
    """Tests for decimal and enumerator protection."""

    def test_decimal(self, codec):
        assert codec.mask("pi is 3.14 roughly").text == f"pi is 3{DOT}14 roughly"

    def test_enumerator_before_capital(self, codec):
        assert codec.mask("1. Apples").text == f"1{DOT} Apples"

    def test_digit_period_before_lowercase_untouched(self, codec):
        assert codec.mask("in 2020. then").text == "in 2020. then"


class TestMarkerCollision:
    """Tests for input that already contains marker code points."""

    def test_mask_does_not_crash(self, codec):
        masked = codec.mask(f"odd{DOT}text. Dr. Who")
        assert masked.substitutions == {12: "."}

    def test_restore_keeps_existing_markers(self, codec):
        text = f"odd{DOT}text. Dr. Who"
        assert codec.mask(text).restore() == text

    def test_restore_slice(self, codec):
        masked = codec.mask("Dr. Smith arrived.")
        assert masked.restore(0, 9) == "Dr. Smith"

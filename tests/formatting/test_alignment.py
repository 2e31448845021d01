"""
Tests for value alignment and padding.
"""

import re

import pytest
from pydantic import ValidationError

from templater.formatting.alignment import Alignment, AlignmentKind
from templater.formatting.formats import IntFormat, NumberFormat, StringFormat


class TestAlignmentApply:
    """Tests for padding text."""

    def test_none_leaves_text(self):
        """Test that the default alignment does nothing."""
        assert Alignment().apply("abc") == "abc"
        assert Alignment(width=10).apply("abc") == "abc"

    def test_left(self):
        """Test padding on the right of left aligned text."""
        alignment = Alignment(kind=AlignmentKind.LEFT, width=4, fill="*")
        assert alignment.apply("ab") == "ab**"

    def test_right(self):
        """Test padding on the left of right aligned text."""
        alignment = Alignment(kind=AlignmentKind.RIGHT, width=5, fill="0")
        assert alignment.apply("42") == "00042"

    def test_center(self):
        """Test padding on both sides of centered text."""
        alignment = Alignment(kind=AlignmentKind.CENTER, width=6, fill="-")
        assert alignment.apply("ab") == "--ab--"

    def test_wider_text_is_not_truncated(self):
        """Test that text longer than the width is kept whole."""
        alignment = Alignment(kind=AlignmentKind.RIGHT, width=2)
        assert alignment.apply("abcd") == "abcd"


class TestAlignmentStrip:
    """Tests for removing padding."""

    def test_strip_right(self):
        """Test removing left padding."""
        alignment = Alignment(kind=AlignmentKind.RIGHT, width=5, fill="0")
        assert alignment.strip("00042") == "42"

    def test_strip_left_and_center(self):
        """Test removing right and both-side padding."""
        assert Alignment(kind=AlignmentKind.LEFT, fill="*").strip("ab**") == "ab"
        assert Alignment(kind=AlignmentKind.CENTER, fill="-").strip("--ab--") == "ab"

    def test_value_made_of_fill(self):
        """Test that text made only of fill characters strips to nothing."""
        alignment = Alignment(kind=AlignmentKind.RIGHT, width=3, fill="0")
        assert alignment.strip("000") == ""

    def test_strip_removes_fill_belonging_to_value(self):
        """Test that stripping cannot tell padding from value characters."""
        alignment = Alignment(kind=AlignmentKind.LEFT, width=4, fill="0")
        assert alignment.strip(alignment.apply("10")) == "1"


class TestAlignmentWithFormats:
    """Tests for rejecting fills that formats could strip from their values."""

    def test_left_fill_ending_a_value(self):
        """Test that a digit fill cannot pad integers on the right."""
        with pytest.raises(ValidationError, match="can end"):
            IntFormat(alignment=Alignment(kind=AlignmentKind.LEFT, width=4, fill="0"))

    def test_center_fill_ending_a_value(self):
        """Test that centering with a digit fill is rejected."""
        with pytest.raises(ValidationError):
            IntFormat(alignment=Alignment(kind=AlignmentKind.CENTER, width=5, fill="1"))

    def test_right_minus_fill(self):
        """Test that a minus fill cannot pad signed numbers on the left."""
        with pytest.raises(ValidationError, match="can start"):
            IntFormat(alignment=Alignment(kind=AlignmentKind.RIGHT, width=4, fill="-"))
        with pytest.raises(ValidationError, match="can start"):
            NumberFormat(
                alignment=Alignment(kind=AlignmentKind.RIGHT, width=8, fill="-")
            )

    def test_right_digit_fill(self):
        """Test that non-zero digits cannot pad integers on the left."""
        with pytest.raises(ValidationError):
            IntFormat(alignment=Alignment(kind=AlignmentKind.RIGHT, width=4, fill="7"))

    def test_hex_letter_fill(self):
        """Test that a letter fill is rejected only when it is a digit of the base."""
        alignment = Alignment(kind=AlignmentKind.LEFT, width=4, fill="a")
        assert IntFormat(base=10, alignment=alignment).format_value(5) == "5aaa"
        with pytest.raises(ValidationError):
            IntFormat(base=16, alignment=alignment)

    def test_string_fill_matching_regex(self):
        """Test that a fill the string regex accepts is rejected."""
        with pytest.raises(ValidationError):
            StringFormat(alignment=Alignment(kind=AlignmentKind.LEFT, width=6, fill="*"))
        fmt = StringFormat(
            regex="[a-z]+", alignment=Alignment(kind=AlignmentKind.LEFT, width=6, fill="*")
        )
        assert fmt.parse_value("abc***") == "abc"

    def test_accepted_fills(self):
        """Test the usual zero and space paddings."""
        IntFormat(alignment=Alignment(kind=AlignmentKind.RIGHT, width=4, fill="0"))
        NumberFormat(alignment=Alignment(kind=AlignmentKind.RIGHT, width=8, fill="0"))
        NumberFormat(alignment=Alignment(kind=AlignmentKind.CENTER, width=8, fill=" "))

    def test_none_keeps_text(self):
        """Test that no alignment strips nothing."""
        assert Alignment().strip("  ab  ") == "  ab  "


class TestAlignmentPattern:
    """Tests for extending read patterns with padding."""

    def test_right_pattern(self):
        """Test that padding may precede the value."""
        regex = Alignment(kind=AlignmentKind.RIGHT, fill="0").wrap_pattern(r"\d+")
        assert re.fullmatch(regex, "00042")

    def test_fill_is_escaped(self):
        """Test that regex metacharacters used as fill are literal."""
        regex = Alignment(kind=AlignmentKind.LEFT, fill=".").wrap_pattern("ab")
        assert re.fullmatch(regex, "ab..")
        assert not re.fullmatch(regex, "abxx")

    def test_none_pattern_unchanged(self):
        """Test that no alignment leaves the pattern untouched."""
        assert Alignment().wrap_pattern(r"\d+") == r"\d+"


class TestAlignmentValidation:
    """Tests for alignment field validation."""

    def test_fill_must_be_single_character(self):
        """Test that multi-character and empty fills are rejected."""
        with pytest.raises(ValidationError):
            Alignment(fill="ab")
        with pytest.raises(ValidationError):
            Alignment(fill="")

    def test_width_must_not_be_negative(self):
        """Test that a negative width is rejected."""
        with pytest.raises(ValidationError):
            Alignment(width=-1)

    def test_kind_from_string(self):
        """Test that the kind can be given by value, as in configuration."""
        assert Alignment.model_validate({"kind": "center"}).kind == AlignmentKind.CENTER

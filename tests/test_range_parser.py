"""Tests for range expression parsing."""

import pytest
from hypothesis import given

from streamslice.core.errors import InvalidRangeError
from streamslice.core.range_parser import parse_range
from streamslice.datastructures.range_spec import (
    AbsoluteEnd,
    RangeIntent,
    RelativeEnd,
    range_intent_strategy,
)


class TestValidRanges:
    @pytest.mark.parametrize(
        "text,expected",
        [
            (":", RangeIntent(None, AbsoluteEnd(None))),
            ("0:", RangeIntent(0, AbsoluteEnd(None))),
            ("0:5", RangeIntent(0, AbsoluteEnd(5))),
            (":5", RangeIntent(None, AbsoluteEnd(5))),
            ("-10:", RangeIntent(-10, AbsoluteEnd(None))),
            ("3:-2", RangeIntent(3, AbsoluteEnd(-2))),
            ("-5:-1", RangeIntent(-5, AbsoluteEnd(-1))),
            ("50:+10", RangeIntent(50, RelativeEnd(10))),
            (":+3", RangeIntent(None, RelativeEnd(3))),
            ("-4:+0", RangeIntent(-4, RelativeEnd(0))),
            ("+2:4", RangeIntent(2, AbsoluteEnd(4))),
            ("007:010", RangeIntent(7, AbsoluteEnd(10))),
        ],
    )
    def test_parses(self, text: str, expected: RangeIntent):
        assert parse_range(text) == expected

    def test_start_after_end_is_not_a_parse_error(self):
        """Only syntax is checked at parse time."""
        assert parse_range("9:2") == RangeIntent(9, AbsoluteEnd(2))

    def test_huge_values_parse(self):
        intent = parse_range("12345678901234567890:+98765432109876543210")
        assert intent.start == 12345678901234567890
        assert intent.end == RelativeEnd(98765432109876543210)

    @given(range_intent_strategy(max_magnitude=10**6))
    def test_rendered_intent_parses_back(self, intent: RangeIntent):
        assert parse_range(intent.to_text()) == intent


class TestInvalidRanges:
    @pytest.mark.parametrize(
        "text",
        [
            "abc",
            "",
            "5",
            "-5",
            "1:2:3",
            "::",
            "a:5",
            "5:b",
            "1.5:2",
            "5:+",
            "5:+-3",
            "5:++3",
            "5:+x",
            " 1:2",
            "1:2 ",
            "1 :2",
            "--1:",
            "5:-",
            "0x10:",
        ],
    )
    def test_rejects(self, text: str):
        with pytest.raises(InvalidRangeError):
            parse_range(text)

    def test_missing_colon_reason(self):
        with pytest.raises(InvalidRangeError, match="exactly one ':'") as exc_info:
            parse_range("abc")
        assert exc_info.value.range_text == "abc"
        assert exc_info.value.stage == "parse"

    def test_bad_relative_length_reason(self):
        with pytest.raises(InvalidRangeError, match=r"\+N with N >= 0"):
            parse_range("1:+-2")

    def test_bad_start_reason(self):
        with pytest.raises(InvalidRangeError, match="start 'x' is not an integer"):
            parse_range("x:1")

    def test_error_message_names_the_range(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            parse_range("1:z")
        assert "'1:z'" in str(exc_info.value)
        assert str(exc_info.value).startswith("parse:")

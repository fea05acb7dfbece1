"""Rendered-format parsing tests."""

import pytest
from lark.exceptions import UnexpectedInput

from pytimeutil import (
    Duration,
    InvalidArgumentError,
    InvalidFormatError,
    parse,
    parse_long,
    parse_short,
)


class TestParseLong:
    def test_basic(self, sample):
        assert parse_long("5-03:07:09:0042") == sample

    def test_zero(self):
        assert parse_long("0-00:00:00:0000") == Duration()

    def test_large_days(self):
        assert parse_long("4294967295-23:59:59:0999").days == 4_294_967_295

    @pytest.mark.parametrize(
        "text",
        [
            "5-3:07:09:0042",
            "5-03:07:09:042",
            "5-03:07:09:00042",
            "5-03:07:09",
            "-03:07:09:0042",
            "03:07:09",
            " 5-03:07:09:0042",
            "5-03:07:09:0042\n",
            "",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(InvalidFormatError):
            parse_long(text)

    @pytest.mark.parametrize(
        "text",
        ["0-24:00:00:0000", "0-00:60:00:0000", "0-00:00:60:0000", "0-00:00:00:1000"],
    )
    def test_field_out_of_range(self, text):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_long(text)
        assert not isinstance(exc_info.value, InvalidFormatError)


class TestParseShort:
    def test_basic(self):
        assert parse_short("03:07:09") == Duration(hours=3, minutes=7, seconds=9)

    def test_long_form_rejected(self):
        with pytest.raises(InvalidFormatError):
            parse_short("5-03:07:09:0042")

    def test_hours_out_of_range(self):
        with pytest.raises(InvalidArgumentError, match="out of range"):
            parse_short("24:00:00")


class TestParse:
    def test_either_form(self, sample):
        assert parse("5-03:07:09:0042") == sample
        assert parse("23:59:59") == Duration(hours=23, minutes=59, seconds=59)

    @pytest.mark.parametrize(
        "duration",
        [
            Duration(),
            Duration(days=5, hours=3, minutes=7, seconds=9, milliseconds=42),
            Duration(days=12_345, hours=23, minutes=59, seconds=59, milliseconds=999),
        ],
    )
    def test_inverse_of_long_rendering(self, duration):
        assert parse(duration.to_long_string()) == duration

    def test_short_rendering_drops_days_and_milliseconds(self, sample):
        assert parse(sample.to_short_string()) == Duration(hours=3, minutes=7, seconds=9)

    def test_wraps_parser_error(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse("twelve o'clock")
        assert isinstance(exc_info.value.wrapped, UnexpectedInput)
        assert str(exc_info.value) == "invalid duration format"
        assert "twelve" in exc_info.value.internal()

    def test_days_past_digit_limit(self, digit_limit):
        text = "1" * (digit_limit + 700) + "-00:00:00:0000"
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_long(text)
        assert isinstance(exc_info.value.wrapped, ValueError)
        assert "conversion limit" in exc_info.value.internal()

    def test_non_string(self):
        with pytest.raises(InvalidFormatError):
            parse(1234)

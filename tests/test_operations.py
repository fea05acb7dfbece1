"""Procedural operation surface tests."""

import pytest

import pytimeutil
from pytimeutil import (
    AbsentTargetError,
    BufferTooSmallError,
    Duration,
    ErrorCode,
    InvalidArgumentError,
    PreconditionViolationError,
)

UNARY_OPERATIONS = [
    "init",
    "increment_days",
    "increment_hours",
    "increment_minutes",
    "increment_seconds",
    "increment_milliseconds",
    "decrement_days",
    "decrement_hours",
    "decrement_minutes",
    "decrement_seconds",
    "decrement_milliseconds",
    "to_long_string",
    "to_short_string",
    "to_milliseconds",
    "get_days",
    "get_hours",
    "get_minutes",
    "get_seconds",
    "get_milliseconds",
]

VALUE_OPERATIONS = [
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "add_milliseconds",
    "from_milliseconds",
    "set_days",
    "set_hours",
    "set_minutes",
    "set_seconds",
    "set_milliseconds",
]


class TestAbsentTarget:
    @pytest.mark.parametrize("name", UNARY_OPERATIONS)
    def test_unary_rejects_none(self, name):
        with pytest.raises(AbsentTargetError) as exc_info:
            getattr(pytimeutil, name)(None)
        assert exc_info.value.code is ErrorCode.ARGUMENT_NULL

    @pytest.mark.parametrize("name", VALUE_OPERATIONS)
    def test_value_operation_rejects_none(self, name):
        with pytest.raises(AbsentTargetError):
            getattr(pytimeutil, name)(None, 1)

    def test_rejects_non_duration(self):
        with pytest.raises(AbsentTargetError, match="no duration"):
            pytimeutil.increment_hours("01:00:00")


class TestInit:
    def test_zeroes_all_fields(self, sample):
        pytimeutil.init(sample)
        assert pytimeutil.to_long_string(sample) == "0-00:00:00:0000"


class TestCarry:
    def test_seconds_to_minutes(self):
        d = Duration(seconds=59)
        pytimeutil.increment_seconds(d)
        assert d.as_tuple() == (0, 0, 1, 0, 0)

    def test_full_cascade(self):
        d = Duration(hours=23, minutes=59, seconds=59)
        pytimeutil.increment_seconds(d)
        assert d.as_tuple() == (1, 0, 0, 0, 0)

    def test_decrement_floor(self, zero):
        with pytest.raises(PreconditionViolationError) as exc_info:
            pytimeutil.decrement_days(zero)
        assert exc_info.value.code is ErrorCode.PRECONDITION
        assert pytimeutil.get_days(zero) == 0

    def test_decrement_borrow(self):
        d = Duration(days=2)
        pytimeutil.decrement_hours(d)
        assert pytimeutil.get_days(d) == 1
        assert pytimeutil.get_hours(d) == 23

    def test_add_minutes(self):
        d = Duration(hours=23, minutes=30)
        pytimeutil.add_minutes(d, 45)
        assert d.as_tuple() == (1, 0, 15, 0, 0)


class TestFormatting:
    def test_long_string(self, sample):
        assert pytimeutil.to_long_string(sample) == "5-03:07:09:0042"

    def test_short_string(self, sample):
        assert pytimeutil.to_short_string(sample) == "03:07:09"

    def test_buffer_too_small(self, sample):
        with pytest.raises(BufferTooSmallError) as exc_info:
            pytimeutil.to_long_string(sample, capacity=10)
        assert exc_info.value.code is ErrorCode.GENERIC

    def test_short_buffer_too_small(self, sample):
        with pytest.raises(BufferTooSmallError):
            pytimeutil.to_short_string(sample, capacity=8)


class TestSetters:
    def test_set_hours_invalid(self, zero):
        with pytest.raises(InvalidArgumentError) as exc_info:
            pytimeutil.set_hours(zero, 24)
        assert exc_info.value.code is ErrorCode.ARGUMENT_INVALID
        assert pytimeutil.get_hours(zero) == 0

    def test_set_hours_valid(self, zero):
        pytimeutil.set_hours(zero, 23)
        assert pytimeutil.get_hours(zero) == 23

    def test_set_days_unbounded(self, zero):
        pytimeutil.set_days(zero, 4_294_967_295)
        assert pytimeutil.get_days(zero) == 4_294_967_295

    @pytest.mark.parametrize(
        "name,value",
        [
            ("set_minutes", 60),
            ("set_seconds", 60),
            ("set_milliseconds", 1000),
        ],
    )
    def test_set_out_of_range(self, zero, name, value):
        with pytest.raises(InvalidArgumentError):
            getattr(pytimeutil, name)(zero, value)
        assert zero == Duration()

    def test_getters(self, sample):
        assert pytimeutil.get_days(sample) == 5
        assert pytimeutil.get_hours(sample) == 3
        assert pytimeutil.get_minutes(sample) == 7
        assert pytimeutil.get_seconds(sample) == 9
        assert pytimeutil.get_milliseconds(sample) == 42


class TestMillisecondConversion:
    def test_from_milliseconds(self, zero):
        pytimeutil.from_milliseconds(zero, 90_061_500)
        assert pytimeutil.get_days(zero) == 1
        assert pytimeutil.get_hours(zero) == 1
        assert pytimeutil.get_minutes(zero) == 1
        assert pytimeutil.get_seconds(zero) == 1
        assert pytimeutil.get_milliseconds(zero) == 500

    def test_to_milliseconds(self, zero):
        pytimeutil.from_milliseconds(zero, 4_294_967_295)
        assert pytimeutil.to_milliseconds(zero) == 4_294_967_295

"""pytimeutil - Elapsed durations with ripple-carry arithmetic."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytimeutil")
except PackageNotFoundError:  # running from a source tree without install
    __version__ = "0.0.0.dev0"

from pytimeutil._errors import (
    AbsentTargetError,
    BufferTooSmallError,
    ErrorCode,
    InvalidArgumentError,
    InvalidFormatError,
    PreconditionViolationError,
    TimeUtilError,
)
from pytimeutil._fields import Unit
from pytimeutil._operations import (
    add_days,
    add_hours,
    add_milliseconds,
    add_minutes,
    add_seconds,
    decrement_days,
    decrement_hours,
    decrement_milliseconds,
    decrement_minutes,
    decrement_seconds,
    from_milliseconds,
    get_days,
    get_hours,
    get_milliseconds,
    get_minutes,
    get_seconds,
    increment_days,
    increment_hours,
    increment_milliseconds,
    increment_minutes,
    increment_seconds,
    init,
    set_days,
    set_hours,
    set_milliseconds,
    set_minutes,
    set_seconds,
    to_long_string,
    to_milliseconds,
    to_short_string,
)
from pytimeutil._parser import parse, parse_long, parse_short
from pytimeutil.duration import Duration

__all__ = [
    "Duration",
    "Unit",
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
    "add_days",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "add_milliseconds",
    "to_long_string",
    "to_short_string",
    "from_milliseconds",
    "to_milliseconds",
    "get_days",
    "get_hours",
    "get_minutes",
    "get_seconds",
    "get_milliseconds",
    "set_days",
    "set_hours",
    "set_minutes",
    "set_seconds",
    "set_milliseconds",
    "parse",
    "parse_long",
    "parse_short",
    "ErrorCode",
    "TimeUtilError",
    "AbsentTargetError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "PreconditionViolationError",
    "BufferTooSmallError",
]

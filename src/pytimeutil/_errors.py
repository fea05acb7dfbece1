"""Exception hierarchy for duration operations."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Outcome classification shared by every error class."""

    OK = 0
    GENERIC = 1
    ARGUMENT_INVALID = 2
    ARGUMENT_NULL = 3
    PRECONDITION = 4


class TimeUtilError(Exception):
    """Base exception for duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    code = ErrorCode.GENERIC

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class AbsentTargetError(TimeUtilError):
    """Raised when an operation is given no duration to act on."""

    code = ErrorCode.ARGUMENT_NULL


class InvalidArgumentError(TimeUtilError):
    """Raised when a value lies outside the range a field or operation accepts."""

    code = ErrorCode.ARGUMENT_INVALID


class InvalidFormatError(InvalidArgumentError):
    """Raised when a string is not one of the rendered duration formats."""


class PreconditionViolationError(TimeUtilError):
    """Raised when an operation would take the duration below zero."""

    code = ErrorCode.PRECONDITION


class BufferTooSmallError(TimeUtilError):
    """Raised when a rendered string does not fit the caller's capacity."""


# Sanitized user-facing error message constants
ERR_MSG_ABSENT_TARGET = "no duration to operate on"
ERR_MSG_FIELD_OUT_OF_RANGE = "field value out of range"
ERR_MSG_INVALID_AMOUNT = "invalid amount"
ERR_MSG_UNKNOWN_UNIT = "unknown time unit"
ERR_MSG_NEGATIVE_DURATION = "duration cannot be negative"
ERR_MSG_BUFFER_TOO_SMALL = "destination buffer too small"
ERR_MSG_DAYS_NOT_RENDERABLE = "days value too large to render"
ERR_MSG_INVALID_FORMAT = "invalid duration format"
ERR_MSG_CEL_CONVERSION = "CEL duration conversion failed"

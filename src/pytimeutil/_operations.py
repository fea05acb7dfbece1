"""Procedural operation surface over Duration.

Each function takes the duration to act on as its first argument and raises
AbsentTargetError, before any side effect, when that argument is missing.
"""

from __future__ import annotations

from pytimeutil._errors import ERR_MSG_ABSENT_TARGET, AbsentTargetError
from pytimeutil._fields import Unit
from pytimeutil.duration import Duration


def _require(duration: Duration | None) -> Duration:
    if duration is None:
        raise AbsentTargetError(ERR_MSG_ABSENT_TARGET, "duration argument is None")
    if not isinstance(duration, Duration):
        raise AbsentTargetError(
            ERR_MSG_ABSENT_TARGET,
            f"expected a Duration, got {type(duration).__name__}",
        )
    return duration


def init(duration: Duration | None) -> None:
    """Zero all five fields of ``duration``."""
    _require(duration).reset()


# ---- Increment ----

def increment_days(duration: Duration | None) -> None:
    _require(duration).increment(Unit.DAYS)


def increment_hours(duration: Duration | None) -> None:
    _require(duration).increment(Unit.HOURS)


def increment_minutes(duration: Duration | None) -> None:
    _require(duration).increment(Unit.MINUTES)


def increment_seconds(duration: Duration | None) -> None:
    _require(duration).increment(Unit.SECONDS)


def increment_milliseconds(duration: Duration | None) -> None:
    _require(duration).increment(Unit.MILLISECONDS)


# ---- Decrement ----

def decrement_days(duration: Duration | None) -> None:
    """Subtract one day; raises PreconditionViolationError at zero days."""
    _require(duration).decrement(Unit.DAYS)


def decrement_hours(duration: Duration | None) -> None:
    _require(duration).decrement(Unit.HOURS)


def decrement_minutes(duration: Duration | None) -> None:
    _require(duration).decrement(Unit.MINUTES)


def decrement_seconds(duration: Duration | None) -> None:
    _require(duration).decrement(Unit.SECONDS)


def decrement_milliseconds(duration: Duration | None) -> None:
    _require(duration).decrement(Unit.MILLISECONDS)


# ---- Add ----

def add_days(duration: Duration | None, amount: int) -> None:
    _require(duration).add(Unit.DAYS, amount)


def add_hours(duration: Duration | None, amount: int) -> None:
    _require(duration).add(Unit.HOURS, amount)


def add_minutes(duration: Duration | None, amount: int) -> None:
    _require(duration).add(Unit.MINUTES, amount)


def add_seconds(duration: Duration | None, amount: int) -> None:
    _require(duration).add(Unit.SECONDS, amount)


def add_milliseconds(duration: Duration | None, amount: int) -> None:
    _require(duration).add(Unit.MILLISECONDS, amount)


# ---- Conversion ----

def to_long_string(duration: Duration | None, capacity: int | None = None) -> str:
    """Render ``D-HH:MM:SS:MMMM``.

    Args:
        duration: The duration to render.
        capacity: Optional destination size; must be at least the text
            length plus one.

    Returns:
        The rendered string.

    Raises:
        AbsentTargetError: If ``duration`` is missing.
        BufferTooSmallError: If ``capacity`` cannot hold the text.
    """
    return _require(duration).to_long_string(capacity)


def to_short_string(duration: Duration | None, capacity: int | None = None) -> str:
    """Render ``HH:MM:SS``; ``capacity`` must be at least 9 when given."""
    return _require(duration).to_short_string(capacity)


def from_milliseconds(duration: Duration | None, total_ms: int) -> None:
    """Overwrite ``duration`` with the decomposition of ``total_ms``."""
    _require(duration).load_milliseconds(total_ms)


def to_milliseconds(duration: Duration | None) -> int:
    return _require(duration).to_milliseconds()


# ---- Getters ----

def get_days(duration: Duration | None) -> int:
    return _require(duration).days


def get_hours(duration: Duration | None) -> int:
    return _require(duration).hours


def get_minutes(duration: Duration | None) -> int:
    return _require(duration).minutes


def get_seconds(duration: Duration | None) -> int:
    return _require(duration).seconds


def get_milliseconds(duration: Duration | None) -> int:
    return _require(duration).milliseconds


# ---- Setters ----

def set_days(duration: Duration | None, value: int) -> None:
    """Assign days; any non-negative integer is accepted."""
    _require(duration).set(Unit.DAYS, value)


def set_hours(duration: Duration | None, value: int) -> None:
    _require(duration).set(Unit.HOURS, value)


def set_minutes(duration: Duration | None, value: int) -> None:
    _require(duration).set(Unit.MINUTES, value)


def set_seconds(duration: Duration | None, value: int) -> None:
    _require(duration).set(Unit.SECONDS, value)


def set_milliseconds(duration: Duration | None, value: int) -> None:
    _require(duration).set(Unit.MILLISECONDS, value)

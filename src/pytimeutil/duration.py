"""Elapsed-duration value type with ripple-carry arithmetic."""

from __future__ import annotations

import datetime
import functools
from io import StringIO

from pytimeutil._constants import (
    FIELD_MIN,
    HOURS_PER_DAY,
    LONG_FORMAT_FIXED_LENGTH,
    MILLISECONDS_PER_DAY,
    MILLISECONDS_PER_HOUR,
    MILLISECONDS_PER_MINUTE,
    MILLISECONDS_PER_SECOND,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    SHORT_FORMAT_LENGTH,
    TERMINATOR_LENGTH,
)
from pytimeutil._errors import (
    ERR_MSG_BUFFER_TOO_SMALL,
    ERR_MSG_DAYS_NOT_RENDERABLE,
    ERR_MSG_FIELD_OUT_OF_RANGE,
    ERR_MSG_INVALID_AMOUNT,
    ERR_MSG_NEGATIVE_DURATION,
    BufferTooSmallError,
    InvalidArgumentError,
    PreconditionViolationError,
)
from pytimeutil._fields import FIELDS, FieldSpec, Unit, carry_chain, resolve_unit

_ONE_MILLISECOND = datetime.timedelta(milliseconds=1)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _describe(value: int) -> str:
    """Decimal text of ``value``, or its bit length past the int/str digit limit."""
    try:
        return str(value)
    except ValueError:
        return f"<{value.bit_length()}-bit int>"


def _check_field(spec: FieldSpec, value: object) -> int:
    """Validate a value for direct assignment to a field."""
    if not _is_int(value):
        raise InvalidArgumentError(
            ERR_MSG_FIELD_OUT_OF_RANGE,
            f"{spec.unit} must be an integer, got {type(value).__name__}",
        )
    if value < FIELD_MIN or (spec.maximum is not None and value > spec.maximum):
        upper = spec.maximum if spec.maximum is not None else "inf"
        raise InvalidArgumentError(
            ERR_MSG_FIELD_OUT_OF_RANGE,
            f"{spec.unit} value {_describe(value)} outside [{FIELD_MIN}, {upper}]",
        )
    return value


def _check_amount(value: object, what: str = "amount") -> int:
    if not _is_int(value):
        raise InvalidArgumentError(
            ERR_MSG_INVALID_AMOUNT,
            f"{what} must be an integer, got {type(value).__name__}",
        )
    if value < 0:
        raise InvalidArgumentError(
            ERR_MSG_INVALID_AMOUNT,
            f"{what} must be non-negative, got {_describe(value)}",
        )
    return value


def _check_capacity(required: int, capacity: object, form: str) -> None:
    if capacity is None:
        return
    if not _is_int(capacity):
        raise InvalidArgumentError(
            ERR_MSG_INVALID_AMOUNT,
            f"capacity must be an integer, got {type(capacity).__name__}",
        )
    if capacity < required:
        raise BufferTooSmallError(
            ERR_MSG_BUFFER_TOO_SMALL,
            f"{form} form needs capacity {required}, got {capacity}",
        )


@functools.total_ordering
class Duration:
    """Elapsed time split into days, hours, minutes, seconds and milliseconds.

    Every bounded field stays within its range after each successful
    operation; overflow and underflow ripple into the next larger unit.
    Days are unbounded. Instances are mutable and therefore unhashable.
    """

    __slots__ = ("_days", "_hours", "_minutes", "_seconds", "_milliseconds")

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> None:
        values = {
            Unit.DAYS: days,
            Unit.HOURS: hours,
            Unit.MINUTES: minutes,
            Unit.SECONDS: seconds,
            Unit.MILLISECONDS: milliseconds,
        }
        for unit, value in values.items():
            _check_field(FIELDS[unit], value)
        for unit, value in values.items():
            self._put(unit, value)

    # ---- Construction ----

    @classmethod
    def from_milliseconds(cls, total: int) -> Duration:
        """Build a duration from a total millisecond count."""
        duration = cls()
        duration.load_milliseconds(total)
        return duration

    @classmethod
    def from_timedelta(cls, delta: datetime.timedelta) -> Duration:
        """Build a duration from a timedelta, truncating below one millisecond."""
        if not isinstance(delta, datetime.timedelta):
            raise InvalidArgumentError(
                ERR_MSG_INVALID_AMOUNT,
                f"expected a timedelta, got {type(delta).__name__}",
            )
        if delta < datetime.timedelta(0):
            raise InvalidArgumentError(
                ERR_MSG_NEGATIVE_DURATION,
                f"negative timedelta: {delta!r}",
            )
        return cls.from_milliseconds(delta // _ONE_MILLISECOND)

    def copy(self) -> Duration:
        return Duration(*self.as_tuple())

    def reset(self) -> None:
        """Zero every field."""
        for unit in Unit:
            self._put(unit, FIELD_MIN)

    # ---- Field access ----

    def _get(self, unit: Unit) -> int:
        return getattr(self, f"_{unit}")

    def _put(self, unit: Unit, value: int) -> None:
        setattr(self, f"_{unit}", value)

    def get(self, unit: Unit | str) -> int:
        return self._get(resolve_unit(unit))

    def set(self, unit: Unit | str, value: int) -> None:
        """Assign a field directly, rejecting values outside its range."""
        unit = resolve_unit(unit)
        self._put(unit, _check_field(FIELDS[unit], value))

    @property
    def days(self) -> int:
        return self._days

    @days.setter
    def days(self, value: int) -> None:
        self.set(Unit.DAYS, value)

    @property
    def hours(self) -> int:
        return self._hours

    @hours.setter
    def hours(self, value: int) -> None:
        self.set(Unit.HOURS, value)

    @property
    def minutes(self) -> int:
        return self._minutes

    @minutes.setter
    def minutes(self, value: int) -> None:
        self.set(Unit.MINUTES, value)

    @property
    def seconds(self) -> int:
        return self._seconds

    @seconds.setter
    def seconds(self, value: int) -> None:
        self.set(Unit.SECONDS, value)

    @property
    def milliseconds(self) -> int:
        return self._milliseconds

    @milliseconds.setter
    def milliseconds(self, value: int) -> None:
        self.set(Unit.MILLISECONDS, value)

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        )

    # ---- Arithmetic ----

    def increment(self, unit: Unit | str) -> None:
        """Add one to ``unit``; a field at its maximum wraps to zero and carries."""
        spec = FIELDS[resolve_unit(unit)]
        while spec.parent is not None and self._get(spec.unit) == spec.maximum:
            self._put(spec.unit, FIELD_MIN)
            spec = FIELDS[spec.parent]
        self._put(spec.unit, self._get(spec.unit) + 1)

    def decrement(self, unit: Unit | str) -> None:
        """Subtract one from ``unit``, borrowing from larger units as needed.

        The borrow chain is checked before anything is mutated: when every
        field from ``unit`` up to days is zero the duration is left untouched
        and PreconditionViolationError is raised.
        """
        chain = carry_chain(unit)
        for depth, spec in enumerate(chain):
            if self._get(spec.unit) > FIELD_MIN:
                break
        else:
            raise PreconditionViolationError(
                ERR_MSG_NEGATIVE_DURATION,
                f"cannot decrement {chain[0].unit} of {self!r}: nothing to borrow from",
            )
        for spec in chain[:depth]:
            self._put(spec.unit, spec.maximum)
        lender = chain[depth]
        self._put(lender.unit, self._get(lender.unit) - 1)

    def add(self, unit: Unit | str, amount: int) -> None:
        """Add ``amount`` of ``unit``, carrying overflow into larger units."""
        chain = carry_chain(unit)
        carry = _check_amount(amount)
        for spec in chain:
            if not spec.bounded:
                self._put(spec.unit, self._get(spec.unit) + carry)
                break
            carry, value = divmod(self._get(spec.unit) + carry, spec.modulus)
            self._put(spec.unit, value)

    def increment_days(self) -> None:
        self.increment(Unit.DAYS)

    def increment_hours(self) -> None:
        self.increment(Unit.HOURS)

    def increment_minutes(self) -> None:
        self.increment(Unit.MINUTES)

    def increment_seconds(self) -> None:
        self.increment(Unit.SECONDS)

    def increment_milliseconds(self) -> None:
        self.increment(Unit.MILLISECONDS)

    def decrement_days(self) -> None:
        self.decrement(Unit.DAYS)

    def decrement_hours(self) -> None:
        self.decrement(Unit.HOURS)

    def decrement_minutes(self) -> None:
        self.decrement(Unit.MINUTES)

    def decrement_seconds(self) -> None:
        self.decrement(Unit.SECONDS)

    def decrement_milliseconds(self) -> None:
        self.decrement(Unit.MILLISECONDS)

    def add_days(self, amount: int) -> None:
        self.add(Unit.DAYS, amount)

    def add_hours(self, amount: int) -> None:
        self.add(Unit.HOURS, amount)

    def add_minutes(self, amount: int) -> None:
        self.add(Unit.MINUTES, amount)

    def add_seconds(self, amount: int) -> None:
        self.add(Unit.SECONDS, amount)

    def add_milliseconds(self, amount: int) -> None:
        self.add(Unit.MILLISECONDS, amount)

    # ---- Millisecond encoding ----

    def load_milliseconds(self, total: int) -> None:
        """Overwrite every field from a total millisecond count."""
        total = _check_amount(total, "total milliseconds")
        rest, milliseconds = divmod(total, MILLISECONDS_PER_SECOND)
        rest, seconds = divmod(rest, SECONDS_PER_MINUTE)
        rest, minutes = divmod(rest, MINUTES_PER_HOUR)
        days, hours = divmod(rest, HOURS_PER_DAY)
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._milliseconds = milliseconds

    def to_milliseconds(self) -> int:
        return (
            self._days * MILLISECONDS_PER_DAY
            + self._hours * MILLISECONDS_PER_HOUR
            + self._minutes * MILLISECONDS_PER_MINUTE
            + self._seconds * MILLISECONDS_PER_SECOND
            + self._milliseconds
        )

    def to_timedelta(self) -> datetime.timedelta:
        try:
            return datetime.timedelta(milliseconds=self.to_milliseconds())
        except OverflowError as exc:
            raise InvalidArgumentError(
                ERR_MSG_INVALID_AMOUNT,
                f"{self!r} exceeds the timedelta range",
                wrapped=exc,
            ) from exc

    # ---- Rendering ----

    def _days_text(self) -> str:
        try:
            return str(self._days)
        except ValueError as exc:
            raise InvalidArgumentError(
                ERR_MSG_DAYS_NOT_RENDERABLE,
                f"days value of {self._days.bit_length()} bits exceeds the decimal conversion limit",
                wrapped=exc,
            ) from exc

    def long_string_length(self) -> int:
        """Exact length of the ``D-HH:MM:SS:MMMM`` form for the current days."""
        return len(self._days_text()) + LONG_FORMAT_FIXED_LENGTH

    def long_string_capacity(self) -> int:
        return self.long_string_length() + TERMINATOR_LENGTH

    @staticmethod
    def short_string_capacity() -> int:
        return SHORT_FORMAT_LENGTH + TERMINATOR_LENGTH

    def to_long_string(self, capacity: int | None = None) -> str:
        """Render ``D-HH:MM:SS:MMMM``.

        Args:
            capacity: Optional size of the caller's destination. It must hold
                the text plus a terminator slot.

        Raises:
            BufferTooSmallError: If ``capacity`` is below long_string_capacity().
            InvalidArgumentError: If days has more digits than Python will
                convert to text.
        """
        _check_capacity(self.long_string_capacity(), capacity, "long")
        return (
            f"{self._days_text()}-{self._hours:02d}:{self._minutes:02d}:"
            f"{self._seconds:02d}:{self._milliseconds:04d}"
        )

    def to_short_string(self, capacity: int | None = None) -> str:
        """Render ``HH:MM:SS``; days and milliseconds are omitted."""
        _check_capacity(self.short_string_capacity(), capacity, "short")
        return f"{self._hours:02d}:{self._minutes:02d}:{self._seconds:02d}"

    def write_long_string(self, w: StringIO, capacity: int | None = None) -> None:
        w.write(self.to_long_string(capacity))

    def write_short_string(self, w: StringIO, capacity: int | None = None) -> None:
        w.write(self.to_short_string(capacity))

    # ---- Value protocol ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_milliseconds() < other.to_milliseconds()

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_milliseconds(self.to_milliseconds() + other.to_milliseconds())

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        difference = self.to_milliseconds() - other.to_milliseconds()
        if difference < 0:
            raise PreconditionViolationError(
                ERR_MSG_NEGATIVE_DURATION,
                f"cannot subtract {other!r} from smaller {self!r}",
            )
        return Duration.from_milliseconds(difference)

    def __str__(self) -> str:
        return self.to_long_string()

    def __repr__(self) -> str:
        return (
            f"Duration(days={_describe(self._days)}, hours={self._hours}, "
            f"minutes={self._minutes}, seconds={self._seconds}, "
            f"milliseconds={self._milliseconds})"
        )

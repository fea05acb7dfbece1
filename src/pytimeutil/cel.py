"""Conversion between Duration and CEL duration values.

CEL durations are ``celpy.celtypes.DurationType`` instances, a
``datetime.timedelta`` subclass limited to +/-10000 years.
"""

from __future__ import annotations

import datetime

from celpy import celtypes

from pytimeutil._constants import MILLISECONDS_PER_SECOND
from pytimeutil._errors import ERR_MSG_CEL_CONVERSION, InvalidArgumentError
from pytimeutil.duration import Duration


def to_cel(duration: Duration) -> celtypes.DurationType:
    """Return the CEL duration equal to ``duration``.

    Raises:
        InvalidArgumentError: If the value exceeds the CEL duration range.
    """
    delta = duration.to_timedelta()
    try:
        return celtypes.DurationType(delta)
    except ValueError as exc:
        raise InvalidArgumentError(
            ERR_MSG_CEL_CONVERSION,
            f"{duration!r} is outside the CEL duration range",
            wrapped=exc,
        ) from exc


def from_cel(value: datetime.timedelta | str) -> Duration:
    """Build a Duration from a CEL duration or a CEL duration string like ``"1h30m"``.

    Parts below one millisecond are truncated.
    """
    if isinstance(value, str):
        try:
            value = celtypes.DurationType(value)
        except (ValueError, ArithmeticError) as exc:
            raise InvalidArgumentError(
                ERR_MSG_CEL_CONVERSION,
                f"cannot parse CEL duration {value!r}",
                wrapped=exc,
            ) from exc
    if not isinstance(value, datetime.timedelta):
        raise InvalidArgumentError(
            ERR_MSG_CEL_CONVERSION,
            f"expected a CEL duration, got {type(value).__name__}",
        )
    return Duration.from_timedelta(value)


def to_cel_literal(duration: Duration) -> str:
    """Render a CEL ``duration()`` call that evaluates to ``duration``."""
    seconds, milliseconds = divmod(duration.to_milliseconds(), MILLISECONDS_PER_SECOND)
    if milliseconds:
        return f'duration("{seconds}s{milliseconds}ms")'
    return f'duration("{seconds}s")'

"""Time units and the carry chain linking them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pytimeutil._constants import (
    HOURS_MAX,
    MILLISECONDS_MAX,
    MINUTES_MAX,
    SECONDS_MAX,
)
from pytimeutil._errors import ERR_MSG_UNKNOWN_UNIT, InvalidArgumentError


class Unit(enum.StrEnum):
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


@dataclass(frozen=True)
class FieldSpec:
    """One field of a duration and the unit it carries into."""

    unit: Unit
    maximum: int | None = None
    parent: Unit | None = None

    @property
    def bounded(self) -> bool:
        return self.maximum is not None

    @property
    def modulus(self) -> int:
        """Wrap-around size of a bounded field."""
        return self.maximum + 1


FIELDS: dict[Unit, FieldSpec] = {
    Unit.MILLISECONDS: FieldSpec(Unit.MILLISECONDS, MILLISECONDS_MAX, Unit.SECONDS),
    Unit.SECONDS: FieldSpec(Unit.SECONDS, SECONDS_MAX, Unit.MINUTES),
    Unit.MINUTES: FieldSpec(Unit.MINUTES, MINUTES_MAX, Unit.HOURS),
    Unit.HOURS: FieldSpec(Unit.HOURS, HOURS_MAX, Unit.DAYS),
    Unit.DAYS: FieldSpec(Unit.DAYS),
}
"""Field descriptors ordered from the smallest unit to days."""


def resolve_unit(unit: Unit | str) -> Unit:
    """Accept a Unit member or its string value."""
    try:
        return Unit(unit)
    except ValueError as exc:
        raise InvalidArgumentError(
            ERR_MSG_UNKNOWN_UNIT,
            f"unknown time unit: {unit!r}",
            wrapped=exc,
        ) from exc


def carry_chain(unit: Unit | str) -> list[FieldSpec]:
    """Return the fields from ``unit`` up to and including days."""
    spec = FIELDS[resolve_unit(unit)]
    chain = [spec]
    while spec.parent is not None:
        spec = FIELDS[spec.parent]
        chain.append(spec)
    return chain

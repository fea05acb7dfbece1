"""Field limits and rendering constants for elapsed durations."""

FIELD_MIN = 0
"""Lower bound shared by every field."""

HOURS_MAX = 23
"""Inclusive upper bound of the hours field."""

MINUTES_MAX = 59
"""Inclusive upper bound of the minutes field."""

SECONDS_MAX = 59
"""Inclusive upper bound of the seconds field."""

MILLISECONDS_MAX = 999
"""Inclusive upper bound of the milliseconds field."""

MILLISECONDS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

MILLISECONDS_PER_MINUTE = MILLISECONDS_PER_SECOND * SECONDS_PER_MINUTE
MILLISECONDS_PER_HOUR = MILLISECONDS_PER_MINUTE * MINUTES_PER_HOUR
MILLISECONDS_PER_DAY = MILLISECONDS_PER_HOUR * HOURS_PER_DAY

LONG_FORMAT_FIXED_LENGTH = 14
"""Length of ``D-HH:MM:SS:MMMM`` not counting the day digits."""

SHORT_FORMAT_LENGTH = 8
"""Length of ``HH:MM:SS``."""

TERMINATOR_LENGTH = 1
"""Slot a caller buffer must keep free after the rendered text."""

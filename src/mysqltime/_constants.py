"""Field layout and range constants for MySQL TIME values."""

from datetime import timedelta

MAX_TIME_HOURS = 838
"""Largest hour count MySQL stores in a TIME column."""

MAX_TIME = timedelta(hours=MAX_TIME_HOURS, minutes=59, seconds=59)
"""Largest TIME magnitude; not enforced by the parser."""

HOURS_WIDTH = 3
"""Zero-padded width of the formatted hour field."""

MINUTES_WIDTH = 2
SECONDS_WIDTH = 2

NEGATIVE_SIGN = "-"
FIELD_SEPARATOR = ":"

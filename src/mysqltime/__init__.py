"""mysqltime - A nullable value type for MySQL TIME columns."""

from __future__ import annotations

try:
    from mysqltime._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from mysqltime._constants import MAX_TIME, MAX_TIME_HOURS
from mysqltime._errors import (
    MalformedLiteralError,
    TimeError,
    UnsupportedSourceTypeError,
)
from mysqltime._json import TimeJSONEncoder, decode_json_time
from mysqltime._parser import parse_mysql_time
from mysqltime._time import Time, format_mysql_time

__all__ = [
    "parse_mysql_time",
    "format_mysql_time",
    "decode_json_time",
    "Time",
    "TimeJSONEncoder",
    "TimeError",
    "MalformedLiteralError",
    "UnsupportedSourceTypeError",
    "MAX_TIME",
    "MAX_TIME_HOURS",
]

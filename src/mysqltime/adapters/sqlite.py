"""sqlite3 adapter and converter for ``Time`` values."""

from __future__ import annotations

import sqlite3

from mysqltime._time import Time


def adapt_time(t: Time) -> str | None:
    return t.value()


def convert_time(raw: bytes) -> Time:
    t = Time()
    t.scan(raw)
    return t


def register_sqlite(*, type_name: str = "TIME") -> None:
    """Register ``Time`` with the ``sqlite3`` module.

    ``Time`` parameters are bound as their literal (or NULL), and columns
    declared as ``type_name`` are read back as ``Time`` when the
    connection is opened with ``detect_types=sqlite3.PARSE_DECLTYPES``.
    sqlite3 does not call converters for NULL, so NULL columns read back
    as ``None``.

    Args:
        type_name: Declared column type to convert. Matched
            case-insensitively by sqlite3.
    """
    sqlite3.register_adapter(Time, adapt_time)
    sqlite3.register_converter(type_name, convert_time)

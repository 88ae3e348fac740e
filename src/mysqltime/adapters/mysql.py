"""mysql-connector-python converter for ``Time`` values."""

from __future__ import annotations

from typing import Any

from mysql.connector.conversion import MySQLConverter

from mysqltime._time import Time


class TimeConverter(MySQLConverter):
    """``MySQLConverter`` that maps TIME columns to ``Time``.

    Pass as ``converter_class`` together with ``use_pure=True``::

        mysql.connector.connect(..., converter_class=TimeConverter, use_pure=True)

    ``Time`` parameters are written as ``'HHH:MM:SS'``, or ``NULL`` when
    unset. ``datetime.time`` parameters keep the stock conversion.
    """

    def _time_to_mysql(self, value: Any) -> bytes | None:
        # Dispatch is by lower-cased class name, shared with datetime.time.
        if isinstance(value, Time):
            literal = value.value()
            return None if literal is None else literal.encode("ascii")
        return super()._time_to_mysql(value)

    def _time_to_python(self, value: bytes, dsc: Any = None) -> Time:
        t = Time()
        t.scan(value)
        return t

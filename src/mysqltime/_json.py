"""JSON boundary for ``Time`` values."""

from __future__ import annotations

import json
from typing import Any

from mysqltime._time import Time


class TimeJSONEncoder(json.JSONEncoder):
    """Encode ``Time`` values as their text form; NULL encodes as ``""``."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Time):
            return o.marshal_text().decode("ascii")
        return super().default(o)


def decode_json_time(value: Any) -> Time:
    """Build a ``Time`` from a decoded JSON value.

    ``None`` and ``""`` give a NULL value; any other string is parsed.

    Raises:
        MalformedLiteralError: If the string is not a TIME literal.
        TypeError: If ``value`` is not a string or ``None``.
    """
    t = Time()
    if value is None:
        return t
    if not isinstance(value, str):
        raise TypeError(
            f"cannot decode mysqltime.Time from JSON {type(value).__name__}"
        )
    t.unmarshal_text(value.encode("utf-8"))
    return t

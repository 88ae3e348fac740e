"""The ``Time`` value type."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from mysqltime._constants import (
    FIELD_SEPARATOR,
    HOURS_WIDTH,
    MINUTES_WIDTH,
    NEGATIVE_SIGN,
    SECONDS_WIDTH,
)
from mysqltime._errors import (
    ERR_MSG_INVALID_ENCODING,
    ERR_MSG_UNSUPPORTED_SOURCE,
    MalformedLiteralError,
    UnsupportedSourceTypeError,
)
from mysqltime._parser import parse_mysql_time

logger = logging.getLogger(__name__)

_ONE_SECOND = timedelta(seconds=1)


def format_mysql_time(duration: timedelta) -> str:
    """Format a signed duration as ``[-]HHH:MM:SS``.

    Sub-second parts are truncated toward zero; the sign is written once,
    in front of the hour field.
    """
    sign = NEGATIVE_SIGN if duration < timedelta(0) else ""
    total_seconds = abs(duration) // _ONE_SECOND
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return (
        f"{sign}{hours:0{HOURS_WIDTH}d}"
        f"{FIELD_SEPARATOR}{minutes:0{MINUTES_WIDTH}d}"
        f"{FIELD_SEPARATOR}{seconds:0{SECONDS_WIDTH}d}"
    )


def _decode(raw: bytes | bytearray | memoryview) -> str:
    try:
        return bytes(raw).decode("ascii")
    except UnicodeDecodeError as e:
        raise MalformedLiteralError(
            ERR_MSG_INVALID_ENCODING,
            f"TIME literal {bytes(raw)!r} contains non-ASCII bytes",
            wrapped=e,
            literal=bytes(raw).decode("ascii", errors="replace"),
        ) from e


class Time:
    """A MySQL ``TIME`` value: a signed duration that may be NULL.

    ``Time()`` is NULL; ``Time(timedelta(hours=5))`` is ``005:00:00``.
    An unset value formats as ``""`` and is written to the database as
    NULL, never as ``000:00:00``.
    """

    __slots__ = ("_duration", "_valid")

    def __init__(self, duration: timedelta | None = None) -> None:
        self._duration = timedelta(0)
        self._valid = False
        if duration is not None:
            self.set_duration(duration)

    @classmethod
    def from_duration(cls, duration: timedelta) -> Time:
        return cls(duration)

    @property
    def valid(self) -> bool:
        return self._valid

    def set_duration(self, duration: timedelta) -> None:
        self._duration = duration
        self._valid = True

    def get_duration(self) -> tuple[timedelta, bool]:
        """Return ``(duration, True)``, or ``(timedelta(0), False)`` if NULL."""
        if not self._valid:
            return timedelta(0), False
        return self._duration, True

    def __str__(self) -> str:
        if not self._valid:
            return ""
        return format_mysql_time(self._duration)

    def __repr__(self) -> str:
        if not self._valid:
            return "Time()"
        return f"Time({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        if self._valid != other._valid:
            return False
        return not self._valid or self._duration == other._duration

    __hash__ = None  # type: ignore[assignment]

    # -- text boundary ------------------------------------------------------

    def marshal_text(self) -> bytes:
        """Encode as text; NULL encodes as ``b""``."""
        return str(self).encode("ascii")

    def unmarshal_text(self, text: bytes) -> None:
        """Decode text produced by :meth:`marshal_text`.

        Empty text marks the value NULL. Parse errors propagate unchanged
        and leave the value as it was.
        """
        if not text:
            self._valid = False
            return
        self.set_duration(parse_mysql_time(_decode(text)))

    # -- database boundary --------------------------------------------------

    def value(self) -> str | None:
        """Return the driver-level value to store: ``None`` or the literal."""
        if not self._valid:
            return None
        return str(self)

    def scan(self, src: Any) -> None:
        """Load a driver-level value read from a TIME column.

        Args:
            src: ``None``, ``str``, or a byte sequence (``bytes``,
                ``bytearray``, ``memoryview``).

        Raises:
            MalformedLiteralError: If the value is not a TIME literal.
            UnsupportedSourceTypeError: If ``src`` has any other type.
        """
        if src is None:
            self._duration = timedelta(0)
            self._valid = False
            return

        if isinstance(src, str):
            shown = src
        elif isinstance(src, (bytes, bytearray, memoryview)):
            shown = bytes(src).decode("ascii", errors="replace")
        else:
            type_name = type(src).__name__
            err = UnsupportedSourceTypeError(
                ERR_MSG_UNSUPPORTED_SOURCE,
                f"unsupported type for mysqltime.Time: {type_name}",
                type_name=type_name,
            )
            logger.debug("rejected TIME source: %s", err.internal())
            raise err

        try:
            raw = src if isinstance(src, str) else _decode(src)
            duration = parse_mysql_time(raw)
        except MalformedLiteralError as e:
            err = MalformedLiteralError(
                f"failed to parse mysqltime.Time from value {shown!r}",
                f"failed to parse mysqltime.Time from value {shown!r}: {e.internal()}",
                wrapped=e,
                literal=shown,
            )
            logger.debug("rejected TIME source: %s", err.internal())
            raise err from e

        self.set_duration(duration)

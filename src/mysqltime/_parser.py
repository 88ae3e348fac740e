"""Parser for MySQL TIME literals.

Two literal families are accepted:

* colon-delimited ``[-]H:M[:S]`` where every part is a run of digits of
  any width (``5:30:15`` and ``005:30:15`` are both valid, ``H:M`` means
  zero seconds);
* compact ``SS``, ``MMSS`` or ``HHMMSS`` with exactly two digits per field
  and no sign.

Field values are not range checked: ``99:99:99`` is 99 hours, 99 minutes
and 99 seconds.
"""

from __future__ import annotations

from datetime import timedelta
from typing import NamedTuple

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from mysqltime._errors import (
    ERR_MSG_INVALID_FORMAT,
    ERR_MSG_OUT_OF_RANGE,
    MalformedLiteralError,
)

TIME_GRAMMAR = r"""
?start: colon_time
      | compact_time

colon_time: NEG? NUMBER ":" NUMBER (":" NUMBER)?

compact_time: PAIR
            | PAIR PAIR
            | PAIR PAIR PAIR

NEG: "-"
NUMBER: /[0-9]+/
PAIR: /[0-9]{2}/
"""


class TimeFields(NamedTuple):
    """Unsigned field values of a parsed literal plus its sign."""

    negative: bool
    hours: int
    minutes: int
    seconds: int

    def to_timedelta(self) -> timedelta:
        magnitude = timedelta(
            hours=self.hours, minutes=self.minutes, seconds=self.seconds
        )
        return -magnitude if self.negative else magnitude


class _TimeTransformer(Transformer):
    def colon_time(self, children: list[Token]) -> TimeFields:
        negative = any(tok.type == "NEG" for tok in children)
        parts = [int(tok) for tok in children if tok.type == "NUMBER"]
        if len(parts) == 2:
            parts.append(0)
        hours, minutes, seconds = parts
        return TimeFields(negative, hours, minutes, seconds)

    def compact_time(self, children: list[Token]) -> TimeFields:
        # Pairs fill from the right: SS, MMSS, HHMMSS.
        values = [int(tok) for tok in children]
        hours, minutes, seconds = [0] * (3 - len(values)) + values
        return TimeFields(False, hours, minutes, seconds)


_parser = Lark(TIME_GRAMMAR, start="start", parser="earley")
_transformer = _TimeTransformer()


def parse_fields(s: str) -> TimeFields:
    """Parse a TIME literal into its sign and field values.

    Raises:
        MalformedLiteralError: If ``s`` matches neither literal family.
    """
    try:
        tree = _parser.parse(s)
        return _transformer.transform(tree)
    except UnexpectedInput as e:
        raise MalformedLiteralError(
            ERR_MSG_INVALID_FORMAT,
            f"invalid TIME literal {s!r} (length {len(s)}): "
            f"unexpected input at column {e.column}",
            wrapped=e,
            literal=s,
        ) from e
    except VisitError as e:
        raise MalformedLiteralError(
            ERR_MSG_INVALID_FORMAT,
            f"invalid TIME literal {s!r}: {e.orig_exc}",
            wrapped=e.orig_exc,
            literal=s,
        ) from e.orig_exc


def parse_mysql_time(s: str) -> timedelta:
    """Parse a MySQL TIME literal into a signed duration.

    Args:
        s: A colon-delimited (``-005:30:15``, ``11:12``) or compact
            (``123456``, ``1234``, ``12``) literal.

    Returns:
        The signed duration the literal denotes.

    Raises:
        MalformedLiteralError: If ``s`` is not a TIME literal or is too
            large to represent.
    """
    fields = parse_fields(s)
    try:
        return fields.to_timedelta()
    except OverflowError as e:
        raise MalformedLiteralError(
            ERR_MSG_OUT_OF_RANGE,
            f"TIME literal {s!r} does not fit a timedelta: {e}",
            wrapped=e,
            literal=s,
        ) from e

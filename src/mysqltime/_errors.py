"""Exception hierarchy for MySQL TIME values."""


class TimeError(Exception):
    """Base exception for MySQL TIME parsing and adapter errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class MalformedLiteralError(TimeError, ValueError):
    """Raised when a string is not a valid MySQL TIME literal."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        literal: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.literal = literal


class UnsupportedSourceTypeError(TimeError, TypeError):
    """Raised when a database value of an unsupported type is scanned."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        type_name: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.type_name = type_name


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FORMAT = "invalid TIME format"
ERR_MSG_OUT_OF_RANGE = "TIME value out of range"
ERR_MSG_INVALID_ENCODING = "TIME literal is not ASCII"
ERR_MSG_UNSUPPORTED_SOURCE = "unsupported type for mysqltime.Time"

"""Database driver adapters for ``Time`` values."""

from __future__ import annotations

from typing import Any

__all__ = [
    "register",
    "register_sqlite",
    "TimeConverter",
]


def register(driver_name: str, **kwargs: Any) -> Any:
    """Hook ``Time`` into a database driver.

    Args:
        driver_name: ``"sqlite"`` or ``"mysql"``.
        **kwargs: Forwarded to the driver-specific function (e.g.
            ``type_name`` for sqlite).

    Returns:
        ``None`` for sqlite, which registers globally; the converter class
        for mysql, to be passed as ``converter_class``.

    Raises:
        ValueError: If the driver name is unknown.
    """
    if driver_name == "sqlite":
        from mysqltime.adapters.sqlite import register_sqlite

        return register_sqlite(**kwargs)
    if driver_name == "mysql":
        from mysqltime.adapters.mysql import TimeConverter

        return TimeConverter

    raise ValueError(
        f"unknown driver: {driver_name!r}. Available: mysql, sqlite"
    )


def __getattr__(name: str) -> Any:
    """Lazy re-exports of per-driver adapters."""
    if name == "register_sqlite":
        from mysqltime.adapters.sqlite import register_sqlite

        return register_sqlite
    if name == "TimeConverter":
        from mysqltime.adapters.mysql import TimeConverter

        return TimeConverter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

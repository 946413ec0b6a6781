"""Helpers for datetimes read back from the database."""

from datetime import UTC, datetime
from typing import overload


@overload
def ensure_utc(value: datetime) -> datetime: ...


@overload
def ensure_utc(value: None) -> None: ...


@overload
def ensure_utc(value: datetime | None) -> datetime | None: ...


def ensure_utc(value: datetime | None) -> datetime | None:
    """
    Attach UTC to naive datetimes.

    SQLite drops the offset of DateTime(timezone=True) columns; every value
    this service writes is UTC, so a naive value read back is UTC too.
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def to_utc(value: datetime) -> datetime:
    """Convert an incoming datetime to UTC, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)

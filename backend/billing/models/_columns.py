"""Shared column factories for ULID keys and store-assigned timestamps."""

from datetime import datetime, timezone

from sqlalchemy import CHAR, DateTime
from sqlalchemy.orm import mapped_column

from billing.db.identifiers import new_ulid

ULID_LENGTH = 26


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops the offset of timezone-aware columns; values are stored in UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def ulid_primary_key():
    return mapped_column(CHAR(ULID_LENGTH), primary_key=True, default=new_ulid)


def created_at_column():
    return mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)


def updated_at_column():
    return mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

"""Timestamp helpers.

Document send dates and audit columns are stored as aware UTC values;
rows read back from drivers that drop tzinfo are normalized here.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize *dt* to aware UTC.

    Naive values are taken to already be UTC. ``None`` passes through so
    optional columns such as ``deleted_at`` can be mapped without a check.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)

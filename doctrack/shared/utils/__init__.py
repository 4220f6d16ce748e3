"""Shared utilities: datetime, id generators, sanitization."""

from doctrack.shared.utils.datetime import ensure_utc, utc_now
from doctrack.shared.utils.generators import generate_object_id, is_object_id
from doctrack.shared.utils.sanitization import sanitize_text

__all__ = [
    "ensure_utc",
    "generate_object_id",
    "is_object_id",
    "sanitize_text",
    "utc_now",
]

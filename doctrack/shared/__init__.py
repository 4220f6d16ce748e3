"""Shared utilities: telemetry (logging) and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from doctrack.shared.utils import ensure_utc, generate_object_id, utc_now

__all__ = ["ensure_utc", "generate_object_id", "utc_now"]

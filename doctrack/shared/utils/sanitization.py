"""Free-text sanitization (markup stripped before persisting)."""

import nh3


def sanitize_text(value: str | None) -> str | None:
    """Strip all HTML tags from value with nh3; None and empty pass through.

    Args:
        value: Raw user-supplied text (e.g. a description).

    Returns:
        Text without markup, trimmed; None when value is None.
    """
    if value is None:
        return None
    if not value:
        return value
    return nh3.clean(value, tags=set(), attributes={}).strip()

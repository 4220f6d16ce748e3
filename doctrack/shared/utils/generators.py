"""ID generators and id-shape checks (24-character hex, ObjectId style)."""

from bson import ObjectId


def generate_object_id() -> str:
    """Generate a new 24-character hex identifier.

    Returns:
        A new ObjectId rendered as a lowercase hex string.
    """
    return str(ObjectId())


def is_object_id(value: object) -> bool:
    """Return True if value is a 24-character hex string."""
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)

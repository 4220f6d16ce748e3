"""Domain enumerations for the doctrack application.

Enums represent fixed sets of domain values (document status, list filters).
"""

from enum import Enum


class DocumentStatus(str, Enum):
    """Submission status of a Document record."""

    PENDING = "PENDING"
    SENT = "SENT"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]


class ActiveStatusFilter(str, Enum):
    """Filter on an entity's (or a tuple's) active flag."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ALL = "all"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid filter values as strings."""
        return [status.value for status in cls]

    def matches(self, is_active: bool) -> bool:
        """Return True when an entity with the given flag passes this filter."""
        if self is ActiveStatusFilter.ALL:
            return True
        return is_active is (self is ActiveStatusFilter.ACTIVE)

"""Pagination DTOs shared by list use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationInfo:
    """Pagination metadata returned alongside a page of items."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


@dataclass(frozen=True)
class Page[T]:
    """One page of items plus its pagination metadata."""

    items: list[T]
    pagination: PaginationInfo

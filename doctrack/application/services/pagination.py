"""Pagination helpers: limit clamping, page validation, metadata and slicing."""

import math
from collections.abc import Sequence

from doctrack.application.dtos.pagination import Page, PaginationInfo
from doctrack.domain.exceptions import (
    PaginationOutOfRangeException,
    ValidationException,
)

MAX_PAGE_SIZE = 100


def clamp_limit(limit: int | None, default: int = 10, maximum: int = MAX_PAGE_SIZE) -> int:
    """Clamp limit into [1, maximum]; None yields default."""
    if limit is None:
        limit = default
    return max(1, min(limit, maximum))


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for total items at limit per page."""
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def validate_page(page: int, total: int, limit: int) -> None:
    """Raise PaginationOutOfRangeException when page falls outside [1, total_pages].

    An empty result (total == 0) accepts any page >= 1.
    """
    pages = total_pages(total, limit)
    if page < 1:
        raise PaginationOutOfRangeException(page, pages)
    if total == 0:
        return
    if page > pages:
        raise PaginationOutOfRangeException(page, pages)


def validate_page_params(page: int, limit: int) -> None:
    """Reject non-positive page or limit before querying."""
    if page < 1:
        raise ValidationException("Page must be >= 1", field="page")
    if limit < 1:
        raise ValidationException("Limit must be >= 1", field="limit")


def build_pagination(page: int, limit: int, total: int) -> PaginationInfo:
    """Build pagination metadata for a page."""
    pages = total_pages(total, limit)
    return PaginationInfo(
        page=page,
        limit=limit,
        total=total,
        total_pages=pages,
        has_next_page=page < pages,
        has_previous_page=page > 1 and pages > 0,
    )


def skip_for(page: int, limit: int) -> int:
    """Offset of the first item of page."""
    return (page - 1) * limit


def paginate[T](items: Sequence[T], page: int, limit: int) -> Page[T]:
    """Validate page and slice an in-memory list.

    Raises:
        PaginationOutOfRangeException: If page is beyond the last page.
    """
    total = len(items)
    validate_page(page, total, limit)
    start = skip_for(page, limit)
    return Page(
        items=list(items[start : start + limit]),
        pagination=build_pagination(page, limit, total),
    )


def empty_page[T](page: int, limit: int) -> Page[T]:
    """Empty page with total 0."""
    return Page(items=[], pagination=build_pagination(page, limit, 0))

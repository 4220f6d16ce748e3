"""Unit tests for pagination helpers."""

import pytest

from doctrack.application.services.pagination import (
    build_pagination,
    clamp_limit,
    empty_page,
    paginate,
    total_pages,
    validate_page,
    validate_page_params,
)
from doctrack.domain.exceptions import (
    PaginationOutOfRangeException,
    ValidationException,
)


class TestClampLimit:
    @pytest.mark.parametrize(
        ("limit", "expected"), [(0, 1), (-5, 1), (10, 10), (100, 100), (500, 100), (None, 10)]
    )
    def test_clamped(self, limit, expected) -> None:
        assert clamp_limit(limit) == expected


class TestTotalPages:
    @pytest.mark.parametrize(
        ("total", "limit", "expected"), [(0, 10, 0), (1, 10, 1), (10, 10, 1), (23, 10, 3)]
    )
    def test_ceil(self, total, limit, expected) -> None:
        assert total_pages(total, limit) == expected


class TestValidatePage:
    def test_empty_result_accepts_first_page(self) -> None:
        validate_page(1, 0, 10)

    def test_beyond_last_page(self) -> None:
        with pytest.raises(PaginationOutOfRangeException) as info:
            validate_page(4, 23, 10)
        assert info.value.details == {"page": 4, "total_pages": 3}

    def test_page_params(self) -> None:
        with pytest.raises(ValidationException):
            validate_page_params(0, 10)
        with pytest.raises(ValidationException):
            validate_page_params(1, 0)


class TestBuildPagination:
    def test_flags(self) -> None:
        info = build_pagination(2, 10, 23)
        assert info.total_pages == 3
        assert info.has_next_page
        assert info.has_previous_page

    def test_last_page(self) -> None:
        info = build_pagination(3, 10, 23)
        assert not info.has_next_page

    def test_empty(self) -> None:
        page = empty_page(1, 10)
        assert page.items == []
        assert page.pagination.total == 0
        assert not page.pagination.has_next_page
        assert not page.pagination.has_previous_page


class TestPaginate:
    def test_page_sizes_add_up_to_total(self) -> None:
        items = list(range(23))
        sizes = [len(paginate(items, p, 10).items) for p in (1, 2, 3)]
        assert sizes == [10, 10, 3]
        assert sum(sizes) == len(items)

    def test_slices_in_order(self) -> None:
        assert paginate(list("abcde"), 2, 2).items == ["c", "d"]

    def test_out_of_range(self) -> None:
        with pytest.raises(PaginationOutOfRangeException):
            paginate([1, 2, 3], 2, 10)

"""Unit tests for Pagination."""

import pytest

from bookclub.domain.error import ValidationError
from bookclub.domain.value import Pagination


class TestPagination:
    """Tests for page arithmetic and validation."""

    def test_offset_skips_previous_pages(self):
        assert Pagination.create(page=3, limit=10, max_limit=100).offset == 20

    @pytest.mark.parametrize(
        ("count", "limit", "pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (5, 2, 3)],
    )
    def test_pages_rounds_up(self, count, limit, pages):
        assert Pagination(page=1, limit=limit).pages_for(count) == pages

    @pytest.mark.parametrize(
        ("page", "limit"),
        [(0, 10), (-1, 10), (1, 0), (1, 101)],
    )
    def test_out_of_range_is_rejected(self, page, limit):
        with pytest.raises(ValidationError):
            Pagination.create(page=page, limit=limit, max_limit=100)

"""Unit tests for listing criteria and paged results."""

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.search import PaginatedResult, SearchCriteria


class TestSearchCriteria:

    def test_defaults(self):
        c = SearchCriteria()
        assert c.page == 1
        assert c.page_size == 10
        assert c.skip == 0
        assert not c.include_deleted

    def test_skip_from_page(self):
        assert SearchCriteria(page=3, page_size=15).skip == 30

    def test_explicit_offset_wins(self):
        assert SearchCriteria(page=3, page_size=15, offset=7).skip == 7

    def test_unknown_sort_field_falls_back(self):
        assert SearchCriteria(sort_by="password").sort_field == "id"
        assert SearchCriteria(sort_by="name").sort_field == "name"

    def test_sort_direction(self):
        assert SearchCriteria(sort_dir="DESC").descending
        assert not SearchCriteria(sort_dir="sideways").descending

    def test_invalid_page_rejected(self):
        with pytest.raises(ValidationError, match="Page must be"):
            SearchCriteria(page=0)

    def test_invalid_page_size_rejected(self):
        with pytest.raises(ValidationError, match="Page size"):
            SearchCriteria(page_size=101)


class TestPaginatedResult:

    def test_total_pages_rounds_up(self):
        result = PaginatedResult(items=[], total=21, page=1, page_size=10)
        assert result.total_pages == 3

    def test_meta(self):
        items = [Product(id=1, name="Widget")]
        result = PaginatedResult(
            items=items, total=1, page=1, page_size=10,
            filter={"name": "wid"}, sort={"by": "id", "dir": "asc"},
        )
        assert result.meta() == {
            "filter": {"name": "wid"},
            "sort": {"by": "id", "dir": "asc"},
            "pagination": {"total": 1, "display": 1, "page": 1, "page_size": 10},
        }

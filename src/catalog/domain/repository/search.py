"""Query-shaping and paging value objects used by repository listings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class SearchCriteria:
    """Filters, paging and sort order for a listing.

    ``sort_by`` is restricted to ``allowed_sort``; anything else falls back
    to the first allowed field. Soft-deleted records are only returned when
    ``include_deleted`` is set.
    """

    filter: dict[str, Any] = field(default_factory=dict)
    page: int = 1
    page_size: int = 10
    sort_by: str = "id"
    sort_dir: str = "asc"
    include_deleted: bool = False
    offset: int | None = None
    allowed_sort: tuple[str, ...] = ("id", "name")

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("Page must be 1 or greater")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValidationError(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}"
            )
        if self.offset is not None and self.offset < 0:
            raise ValidationError("Offset cannot be negative")

    @property
    def skip(self) -> int:
        if self.offset is not None:
            return self.offset
        return (self.page - 1) * self.page_size

    @property
    def sort_field(self) -> str:
        if self.sort_by in self.allowed_sort:
            return self.sort_by
        return self.allowed_sort[0]

    @property
    def descending(self) -> bool:
        return self.sort_dir.lower() == "desc"


@dataclass(frozen=True)
class PaginatedResult:
    """One page of products plus what is needed to fetch the next."""

    items: list[Product]
    total: int
    page: int
    page_size: int
    filter: dict[str, Any] = field(default_factory=dict)
    sort: dict[str, str] = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)

    def meta(self) -> dict[str, Any]:
        return {
            "filter": self.filter,
            "sort": self.sort,
            "pagination": {
                "total": self.total,
                "display": len(self.items),
                "page": self.page,
                "page_size": self.page_size,
            },
        }

"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from catalog.domain.model.product import Product
from catalog.domain.repository.search import PaginatedResult


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    status: str  # label, e.g. "Draft"
    lock_version: int
    detail_info: dict[str, Any]

    @staticmethod
    def from_entity(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            status=product.status.label,
            lock_version=product.lock_version.value,
            detail_info=product.detail_info.to_dict(),
        )


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of a product listing."""

    items: list[ProductDTO]
    meta: dict[str, Any]

    @staticmethod
    def from_result(result: PaginatedResult) -> ProductPageDTO:
        return ProductPageDTO(
            items=[ProductDTO.from_entity(p) for p in result.items],
            meta=result.meta(),
        )

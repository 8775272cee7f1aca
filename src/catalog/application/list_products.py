"""Application service: List Products use case."""

from __future__ import annotations

from catalog.application.dto import ProductPageDTO
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.search import SearchCriteria


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, criteria: SearchCriteria | None = None) -> ProductPageDTO:
        """Return one page of the catalog; soft-deleted products are hidden by default."""
        result = self._product_repo.list(criteria or SearchCriteria())
        return ProductPageDTO.from_result(result)

"""Application service: Restore Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class RestoreProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, actor: str = "system") -> ProductDTO:
        """Bring a soft-deleted product back as a draft."""
        product = self._product_repo.restore(product_id, actor=actor)
        if product is None:
            raise EntityNotFoundError(
                f"No deleted product with ID '{product_id}' to restore"
            )
        return ProductDTO.from_entity(product)

"""Application service: Delete Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, actor: str = "system") -> ProductDTO:
        """Soft-delete a product so it can be restored later.

        Active products must be deactivated first.
        """
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.mark_as_deleted(actor=actor)
        return ProductDTO.from_entity(self._product_repo.delete(product))

"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import DuplicateNameError
from catalog.domain.model.product import Product
from catalog.domain.model.status import Status
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        status: str | int = "draft",
        detail_info: dict | None = None,
        actor: str = "system",
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            status=Status.parse(status),
            detail_info=detail_info,
            actor=actor,
        )

        # Fail early with a clear message; the repository still guards
        # against a concurrent insert slipping in between.
        if self._product_repo.exists_by_name(product.name):
            raise DuplicateNameError(product.name)

        created = self._product_repo.insert(product)
        logger.info("product_added", product_id=created.id, actor=actor)
        return ProductDTO.from_entity(created)

"""Application service: Update Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    ValidationError,
)
from catalog.domain.model.status import Status
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        status: str | int | None = None,
        detail_info: dict | None = None,
        lock_version: int | None = None,
        actor: str = "system",
    ) -> ProductDTO:
        """Rename, re-status or annotate a product.

        When ``lock_version`` is given it must match the stored version,
        otherwise the caller is working from stale data and is rejected.
        """
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if lock_version is not None:
            product.verify_lock_version(lock_version)

        new_status = Status.parse(status) if status is not None else None
        if new_status is Status.DELETED:
            raise ValidationError("Use delete to remove a product")
        has_field_changes = name is not None or bool(detail_info)
        product.guard_update(has_field_changes, new_status)

        if name is not None and name.strip() != product.name:
            product.rename(name)
            if self._product_repo.exists_by_name(product.name):
                raise DuplicateNameError(product.name)

        if new_status is not None:
            product.transition_to(new_status)

        product.update_detail_info(detail_info or {}, actor=actor)
        return ProductDTO.from_entity(self._product_repo.update(product))

"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (MongoDB, in-memory)
live in the infrastructure layer and in the test suite.

Lookups never raise for a missing product; absence is ``None``.
Name matching is exact and case-sensitive throughout.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.repository.search import PaginatedResult, SearchCriteria


class ProductRepository(ABC):

    @abstractmethod
    def insert(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned ID.

        Raises DuplicateNameError if the name is already taken.
        """

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Persist changes to an existing product and bump its lock version.

        Raises EntityNotFoundError if no live product has this ID,
        OptimisticLockError if the stored version moved on, and
        DuplicateNameError if the new name belongs to another product.
        """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a live product by its ID, or None."""

    @abstractmethod
    def find_by_name(self, name: str) -> Product | None:
        """Return a live product by its exact name, or None."""

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """Whether a live product holds this name."""

    @abstractmethod
    def delete(self, product: Product) -> Product:
        """Soft-delete a product. Deleting it twice is a no-op."""

    @abstractmethod
    def restore(self, product_id: int, actor: str = "system") -> Product | None:
        """Restore a soft-deleted product, or return None if there is none.

        ``actor`` is recorded in the product's change log. Raises
        DuplicateNameError if a live product has taken the name meanwhile.
        """

    @abstractmethod
    def list(self, criteria: SearchCriteria) -> PaginatedResult:
        """Return one page of products matching the criteria."""

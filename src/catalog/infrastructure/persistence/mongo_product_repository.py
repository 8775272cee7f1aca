"""MongoDB-backed implementation of ProductRepository."""

from __future__ import annotations

import re
from dataclasses import replace
from datetime import datetime, timezone

import structlog
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError

from catalog.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    OptimisticLockError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.status import Status
from catalog.domain.model.value_objects import DetailInfo, LockVersion
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.search import PaginatedResult, SearchCriteria
from catalog.infrastructure.persistence.document_store import Document, MongoDocumentStore
from catalog.infrastructure.persistence.sequence import MongoSequence

logger = structlog.get_logger(__name__)

LIVE_NAME_INDEX = "name_live_unique"


class MongoProductRepository(ProductRepository):
    """Stores one document per product, keyed by the integer domain ``id``.

    The document's own ``_id`` is assigned by MongoDB and never leaves this
    class. Live product names are unique, enforced by a partial unique index
    on ``name`` that skips soft-deleted documents; a deleted product's name
    may be reused, and restoring it is refused while the name is taken.
    """

    def __init__(self, store: MongoDocumentStore, sequence: MongoSequence) -> None:
        self._store = store
        self._sequence = sequence

    def ensure_indexes(self) -> None:
        self._store.ensure_index("id", unique=True)
        self._store.ensure_index(
            "name",
            unique=True,
            partial_filter={"deleted": False},
            name=LIVE_NAME_INDEX,
        )

    # --- ProductRepository interface ------------------------------------------

    def insert(self, product: Product) -> Product:
        if self.exists_by_name(product.name):
            raise DuplicateNameError(product.name)

        created = replace(
            product, id=self._sequence.next_value(), lock_version=LockVersion()
        )
        try:
            self._store.insert(self._to_document(created))
        except DuplicateKeyError as exc:
            # Lost the race against a concurrent insert of the same name.
            if self._is_name_conflict(exc, created):
                raise DuplicateNameError(product.name) from exc
            raise

        logger.info("product_inserted", product_id=created.id, name=created.name)
        return created

    def update(self, product: Product) -> Product:
        if product.id is None:
            raise EntityNotFoundError("Cannot update a product that was never inserted")

        if self._live_holder(product) is not None:
            raise DuplicateNameError(product.name)

        self._save(product, currently_deleted=False)
        logger.info(
            "product_updated",
            product_id=product.id,
            lock_version=product.lock_version.value,
        )
        return product

    def find_by_id(self, product_id: int) -> Product | None:
        doc = self._store.find_one({"id": product_id, "deleted": False})
        return self._to_domain(doc) if doc is not None else None

    def find_by_name(self, name: str) -> Product | None:
        doc = self._store.find_one({"name": name, "deleted": False})
        return self._to_domain(doc) if doc is not None else None

    def exists_by_name(self, name: str) -> bool:
        return self._store.find_one({"name": name, "deleted": False}) is not None

    def delete(self, product: Product) -> Product:
        if product.id is None:
            raise EntityNotFoundError("Cannot delete a product that was never inserted")

        doc = self._store.find_one({"id": product.id})
        if doc is None:
            raise EntityNotFoundError(f"Product with ID '{product.id}' not found")
        if doc["deleted"]:
            return self._to_domain(doc)

        if not product.is_deleted:
            product.mark_as_deleted()
        self._save(product, currently_deleted=False)
        logger.info("product_deleted", product_id=product.id)
        return product

    def restore(self, product_id: int, actor: str = "system") -> Product | None:
        doc = self._store.find_one({"id": product_id, "deleted": True})
        if doc is None:
            return None

        product = self._to_domain(doc)
        if self._live_holder(product) is not None:
            raise DuplicateNameError(product.name)
        product.restore(actor=actor)
        self._save(product, currently_deleted=True)
        logger.info("product_restored", product_id=product.id, actor=actor)
        return product

    def list(self, criteria: SearchCriteria) -> PaginatedResult:
        query = self._build_query(criteria)
        direction = DESCENDING if criteria.descending else ASCENDING

        total = self._store.count(query)
        docs = self._store.find(
            query,
            sort=[(criteria.sort_field, direction)],
            skip=criteria.skip,
            limit=criteria.page_size,
        )

        return PaginatedResult(
            items=[self._to_domain(doc) for doc in docs],
            total=total,
            page=criteria.page,
            page_size=criteria.page_size,
            filter=dict(criteria.filter),
            sort={
                "by": criteria.sort_field,
                "dir": "desc" if criteria.descending else "asc",
            },
        )

    # --- Persistence helpers --------------------------------------------------

    def _save(self, product: Product, currently_deleted: bool) -> None:
        """Write *product* over its stored document using optimistic locking."""
        current = product.lock_version
        changes = self._to_document(replace(product, lock_version=current.increment()))
        del changes["id"]

        try:
            matched = self._store.update_one(
                {
                    "id": product.id,
                    "deleted": currently_deleted,
                    "lock_version": current.value,
                },
                changes,
            )
        except DuplicateKeyError as exc:
            if self._is_name_conflict(exc, product):
                raise DuplicateNameError(product.name) from exc
            raise

        if matched == 0:
            if self._store.count({"id": product.id, "deleted": currently_deleted}) == 0:
                raise EntityNotFoundError(f"Product with ID '{product.id}' not found")
            raise OptimisticLockError(
                f"Product #{product.id} was modified by another process"
            )

        product.upgrade_lock_version()

    def _live_holder(self, product: Product) -> Document | None:
        """Another live product already using *product*'s name, if any."""
        return self._store.find_one(
            {"name": product.name, "deleted": False, "id": {"$ne": product.id}}
        )

    def _is_name_conflict(self, exc: DuplicateKeyError, product: Product) -> bool:
        key_pattern = (exc.details or {}).get("keyPattern")
        if key_pattern:
            return "name" in key_pattern
        # No keyPattern in the error: ask the store who holds the name.
        holder = self._store.find_one({"name": product.name, "deleted": False})
        return holder is not None and holder["id"] != product.id

    @staticmethod
    def _build_query(criteria: SearchCriteria) -> Document:
        query: Document = {} if criteria.include_deleted else {"deleted": False}
        filters = criteria.filter

        if filters.get("id") not in (None, ""):
            try:
                query["id"] = int(filters["id"])
            except (TypeError, ValueError) as exc:
                raise ValidationError(f"Invalid product ID filter: {filters['id']!r}") from exc

        if filters.get("status") not in (None, ""):
            query["status"] = int(Status.parse(filters["status"]))

        if filters.get("name"):
            query["name"] = {"$regex": re.escape(str(filters["name"])), "$options": "i"}

        return query

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_document(product: Product) -> Document:
        return {
            "id": product.id,
            "name": product.name,
            "status": int(product.status),
            "deleted": product.is_deleted,
            "detail_info": product.detail_info.to_dict(),
            "lock_version": product.lock_version.value,
            "synced_at": datetime.now(timezone.utc),
        }

    @staticmethod
    def _to_domain(doc: Document) -> Product:
        return Product(
            id=int(doc["id"]),
            name=doc["name"],
            status=Status(doc["status"]),
            detail_info=DetailInfo(dict(doc.get("detail_info") or {})),
            lock_version=LockVersion(int(doc.get("lock_version", 1))),
        )


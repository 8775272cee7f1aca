"""Collection-scoped access to a MongoDB document store.

A store is bound to exactly one collection, handed in at construction.
It works on plain dicts and knows nothing about domain objects; mapping
to and from aggregates is the concrete repository's job.

Driver errors (``pymongo.errors.PyMongoError``) are not caught here:
no retries, no backoff, no partial-failure recovery.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection

Document = dict[str, Any]
SortSpec = list[tuple[str, int]]


class DocumentStore(ABC):

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the collection this store is bound to."""

    @abstractmethod
    def find_one(self, filter: Document) -> Document | None:
        """Return the first document matching *filter*, or None."""

    @abstractmethod
    def insert(self, document: Document) -> str:
        """Persist *document* and return its store-assigned ID as a string."""


class MongoDocumentStore(DocumentStore):

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    @property
    def collection_name(self) -> str:
        return self._collection.name

    # --- DocumentStore interface ----------------------------------------------

    def find_one(self, filter: Document, sort: SortSpec | None = None) -> Document | None:
        doc = self._collection.find_one(filter, sort=sort)
        return self._to_plain(doc) if doc is not None else None

    def insert(self, document: Document) -> str:
        # insert_one adds "_id" to the dict it is given; keep the caller's clean.
        result = self._collection.insert_one(dict(document))
        return str(result.inserted_id)

    # --- Supplementary primitives ---------------------------------------------

    def find(
        self,
        filter: Document,
        sort: SortSpec | None = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Document]:
        cursor = self._collection.find(filter)
        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return [self._to_plain(doc) for doc in cursor]

    def count(self, filter: Document) -> int:
        return self._collection.count_documents(filter)

    def update_one(self, filter: Document, changes: Document) -> int:
        """Apply ``$set`` *changes* to the first match; return matched count."""
        result = self._collection.update_one(filter, {"$set": changes})
        return result.matched_count

    def find_one_and_update(
        self, filter: Document, update: Document, upsert: bool = False
    ) -> Document | None:
        doc = self._collection.find_one_and_update(
            filter,
            update,
            upsert=upsert,
            return_document=ReturnDocument.AFTER,
        )
        return self._to_plain(doc) if doc is not None else None

    def ensure_index(
        self,
        field: str,
        unique: bool = False,
        partial_filter: Document | None = None,
        name: str | None = None,
    ) -> str:
        options: Document = {"unique": unique}
        if partial_filter is not None:
            options["partialFilterExpression"] = partial_filter
        if name is not None:
            options["name"] = name
        return self._collection.create_index([(field, ASCENDING)], **options)

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _to_plain(doc: Document) -> Document:
        plain = dict(doc)
        if "_id" in plain:
            plain["_id"] = str(plain["_id"])
        return plain

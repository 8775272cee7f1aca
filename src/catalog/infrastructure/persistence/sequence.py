"""Monotonic integer IDs backed by a MongoDB counters collection."""

from __future__ import annotations

from catalog.infrastructure.persistence.document_store import MongoDocumentStore


class MongoSequence:
    """Hands out 1, 2, 3, ... for one named counter.

    Each call is a single atomic ``$inc`` on the counter document, so
    concurrent callers never receive the same value.
    """

    def __init__(self, store: MongoDocumentStore, name: str) -> None:
        self._store = store
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def next_value(self) -> int:
        doc = self._store.find_one_and_update(
            {"_id": self._name},
            {"$inc": {"value": 1}},
            upsert=True,
        )
        return int(doc["value"])

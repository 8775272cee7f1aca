"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and every dependency is
passed in explicitly; there is no process-wide registry.
"""

from __future__ import annotations

from pymongo import MongoClient
from pymongo.database import Database

from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.document_store import MongoDocumentStore
from catalog.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from catalog.infrastructure.persistence.sequence import MongoSequence

PRODUCT_SEQUENCE = "product_id_seq"


def mongo_database(settings: Settings) -> Database:
    client: MongoClient = MongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    )
    return client[settings.MONGODB_DATABASE]


def build_product_repository(
    database: Database, settings: Settings
) -> MongoProductRepository:
    store = MongoDocumentStore(database[settings.PRODUCT_COLLECTION])
    counters = MongoDocumentStore(database[settings.COUNTER_COLLECTION])
    repo = MongoProductRepository(store, MongoSequence(counters, PRODUCT_SEQUENCE))
    repo.ensure_indexes()
    return repo


def product_repository(settings: Settings | None = None) -> MongoProductRepository:
    settings = settings or Settings()
    return build_product_repository(mongo_database(settings), settings)

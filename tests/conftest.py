"""Shared fixtures: an in-memory MongoDB stand-in per test."""

import mongomock
import pytest

from catalog.infrastructure.config import Settings
from catalog.infrastructure.bootstrap import build_product_repository
from catalog.infrastructure.persistence.document_store import MongoDocumentStore


@pytest.fixture
def mongo_db():
    client = mongomock.MongoClient()
    return client["catalog_test"]


@pytest.fixture
def settings():
    return Settings(APP_ENV="dev", MONGODB_DATABASE="catalog_test")


@pytest.fixture
def product_store(mongo_db):
    return MongoDocumentStore(mongo_db["product"])


@pytest.fixture
def mongo_product_repo(mongo_db, settings):
    return build_product_repository(mongo_db, settings)

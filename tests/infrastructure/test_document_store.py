"""Tests for the collection-scoped MongoDB store."""

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from catalog.infrastructure.persistence.document_store import MongoDocumentStore
from catalog.infrastructure.persistence.sequence import MongoSequence


class TestMongoDocumentStore:

    def test_bound_to_one_collection(self, product_store):
        assert product_store.collection_name == "product"

    def test_insert_returns_string_id(self, product_store):
        doc_id = product_store.insert({"name": "Widget"})

        assert isinstance(doc_id, str)
        assert ObjectId.is_valid(doc_id)

    def test_insert_does_not_mutate_input(self, product_store):
        doc = {"name": "Widget"}
        product_store.insert(doc)
        assert doc == {"name": "Widget"}

    def test_find_one(self, product_store):
        doc_id = product_store.insert({"name": "Widget", "qty": 3})

        found = product_store.find_one({"name": "Widget"})

        assert found == {"_id": doc_id, "name": "Widget", "qty": 3}

    def test_find_one_absent(self, product_store):
        assert product_store.find_one({"name": "Nothing"}) is None

    def test_insert_performs_no_duplicate_detection(self, product_store):
        product_store.insert({"name": "Widget"})
        product_store.insert({"name": "Widget"})
        assert product_store.count({"name": "Widget"}) == 2

    def test_find_sort_skip_limit(self, product_store):
        for n in (3, 1, 2, 5, 4):
            product_store.insert({"n": n})

        docs = product_store.find({}, sort=[("n", -1)], skip=1, limit=2)

        assert [d["n"] for d in docs] == [4, 3]

    def test_update_one_reports_matches(self, product_store):
        product_store.insert({"name": "Widget", "qty": 1})

        assert product_store.update_one({"name": "Widget"}, {"qty": 2}) == 1
        assert product_store.update_one({"name": "Nothing"}, {"qty": 2}) == 0
        assert product_store.find_one({"name": "Widget"})["qty"] == 2

    def test_unique_index_errors_propagate(self, product_store):
        product_store.ensure_index("name", unique=True)
        product_store.insert({"name": "Widget"})

        with pytest.raises(DuplicateKeyError):
            product_store.insert({"name": "Widget"})


class TestMongoSequence:

    def test_counts_from_one(self, mongo_db):
        seq = MongoSequence(MongoDocumentStore(mongo_db["counters"]), "product_id_seq")

        assert [seq.next_value() for _ in range(3)] == [1, 2, 3]

    def test_counters_are_independent(self, mongo_db):
        store = MongoDocumentStore(mongo_db["counters"])
        a = MongoSequence(store, "a")
        b = MongoSequence(store, "b")

        a.next_value()
        a.next_value()

        assert b.next_value() == 1
        assert a.next_value() == 3

"""Integration tests for the UpdateProduct use case."""

import pytest

from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    OptimisticLockError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.status import Status
from tests.fakes import FakeProductRepository


def _setup():
    return FakeProductRepository([
        Product(id=1, name="Widget"),
        Product(id=2, name="Gadget", status=Status.ACTIVE),
    ])


class TestUpdateProduct:

    def test_rename(self):
        repo = _setup()
        dto = UpdateProductHandler(repo).handle(product_id=1, name="Widget Pro")

        assert dto.name == "Widget Pro"
        assert dto.lock_version == 2
        assert repo.find_by_id(1).name == "Widget Pro"
        assert repo.find_by_name("Widget") is None

    def test_status_transition(self):
        repo = _setup()
        dto = UpdateProductHandler(repo).handle(product_id=1, status="active")
        assert dto.status == "Active"

    def test_detail_merge_and_audit_stamp(self):
        repo = _setup()
        dto = UpdateProductHandler(repo).handle(
            product_id=1, detail_info={"color": "blue"}, actor="bob"
        )

        assert dto.detail_info["color"] == "blue"
        assert dto.detail_info["change_log"]["updated_by"] == "bob"

    def test_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateProductHandler(_setup()).handle(product_id=999, name="X")

    def test_rename_to_taken_name_rejected(self):
        with pytest.raises(DuplicateNameError, match="'Gadget' already exists"):
            UpdateProductHandler(_setup()).handle(product_id=1, name="Gadget")

    def test_stale_lock_version_rejected(self):
        repo = _setup()
        handler = UpdateProductHandler(repo)
        handler.handle(product_id=1, name="Widget v2", lock_version=1)

        with pytest.raises(OptimisticLockError):
            handler.handle(product_id=1, name="Widget v3", lock_version=1)

    def test_invalid_transition_rejected(self):
        with pytest.raises(ValidationError, match="cannot move from Active to Draft"):
            UpdateProductHandler(_setup()).handle(product_id=2, status="draft")

    def test_same_status_without_changes_rejected(self):
        with pytest.raises(ValidationError, match="already Draft"):
            UpdateProductHandler(_setup()).handle(product_id=1, status="draft")

    def test_deleting_through_update_rejected(self):
        repo = _setup()

        with pytest.raises(ValidationError, match="Use delete"):
            UpdateProductHandler(repo).handle(product_id=1, status="deleted")
        assert repo.find_by_id(1).status is Status.DRAFT

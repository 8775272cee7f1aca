"""Unit tests for the Product aggregate."""

import pytest

from catalog.domain.exceptions import OptimisticLockError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.status import Status
from catalog.domain.model.value_objects import LockVersion


class TestCreate:

    def test_new_product_has_no_id_and_is_draft(self):
        p = Product.create("Widget")
        assert p.id is None
        assert p.status is Status.DRAFT
        assert p.lock_version == LockVersion(1)

    def test_name_is_stripped(self):
        assert Product.create("  Widget  ").name == "Widget"

    def test_created_stamp_recorded(self):
        p = Product.create("Widget", actor="alice")
        assert p.detail_info.change_log["created_by"] == "alice"
        assert "created_at" in p.detail_info.change_log

    def test_extra_details_kept(self):
        p = Product.create("Widget", detail_info={"color": "red"})
        assert p.detail_info.get("color") == "red"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create(name)

    def test_overlong_name_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Product.create("x" * 256)

    def test_invalid_initial_status_rejected(self):
        with pytest.raises(ValidationError, match="cannot be created"):
            Product.create("Widget", status=Status.DELETED)


class TestLifecycle:

    def test_transition_allowed(self):
        p = Product.create("Widget")
        p.transition_to(Status.ACTIVE)
        assert p.status is Status.ACTIVE

    def test_transition_to_same_status_is_noop(self):
        p = Product.create("Widget")
        p.transition_to(Status.DRAFT)
        assert p.status is Status.DRAFT

    def test_invalid_transition_rejected(self):
        p = Product.create("Widget", status=Status.ACTIVE)
        with pytest.raises(ValidationError, match="cannot move from Active to Draft"):
            p.transition_to(Status.DRAFT)

    def test_guard_update_rejects_field_changes_on_locked_status(self):
        p = Product(id=1, name="Widget", status=Status.COMPLETED)
        with pytest.raises(ValidationError, match="cannot be updated"):
            p.guard_update(has_field_changes=True)

    def test_guard_update_rejects_status_already_set(self):
        p = Product(id=1, name="Widget", status=Status.DRAFT)
        with pytest.raises(ValidationError, match="already Draft"):
            p.guard_update(has_field_changes=False, new_status=Status.DRAFT)

    def test_delete_then_restore(self):
        p = Product(id=1, name="Widget")
        p.mark_as_deleted(actor="bob")
        assert p.is_deleted
        assert p.detail_info.change_log["deleted_by"] == "bob"

        p.restore(actor="carol")
        assert p.status is Status.DRAFT
        assert p.detail_info.change_log["restored_by"] == "carol"

    def test_active_product_cannot_be_deleted(self):
        p = Product(id=1, name="Widget", status=Status.ACTIVE)
        with pytest.raises(ValidationError, match="cannot be deleted"):
            p.mark_as_deleted()

    def test_restore_requires_deleted_product(self):
        p = Product(id=1, name="Widget")
        with pytest.raises(ValidationError, match="is not deleted"):
            p.restore()


class TestOptimisticLock:

    def test_matching_version_accepted(self):
        p = Product(id=1, name="Widget", lock_version=LockVersion(2))
        p.verify_lock_version(2)

    def test_stale_version_rejected(self):
        p = Product(id=1, name="Widget", lock_version=LockVersion(3))
        with pytest.raises(OptimisticLockError, match="expected version 2"):
            p.verify_lock_version(2)

    def test_upgrade(self):
        p = Product(id=1, name="Widget")
        p.upgrade_lock_version()
        assert p.lock_version == LockVersion(2)

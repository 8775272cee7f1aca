"""Product aggregate.

Products have their own lifecycle: they are drafted, activated, renamed,
and removed from the catalog. Removal is a soft delete, so a product can
be brought back with :meth:`Product.restore`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import OptimisticLockError, ValidationError
from catalog.domain.model.status import Status
from catalog.domain.model.value_objects import DetailInfo, LockVersion

MAX_NAME_LENGTH = 255


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Product name cannot exceed {MAX_NAME_LENGTH} characters"
        )
    return name


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root: it is the entry point for any operation
    involving a product. ``id`` stays ``None`` until the repository
    assigns one on insert.
    """

    id: int | None
    name: str
    status: Status = Status.DRAFT
    detail_info: DetailInfo = field(default_factory=DetailInfo)
    lock_version: LockVersion = field(default_factory=LockVersion)

    RESOURCE = "Product"

    @classmethod
    def create(
        cls,
        name: str,
        status: Status = Status.DRAFT,
        detail_info: dict | None = None,
        actor: str = "system",
        at: datetime | None = None,
    ) -> Product:
        """Build a new, not yet persisted product."""
        if not status.is_valid_for_creation:
            raise ValidationError(
                f"{cls.RESOURCE} cannot be created with status {status.label}"
            )
        info = DetailInfo().merged(detail_info or {}).stamped(
            "created", actor, at or _now()
        )
        return cls(id=None, name=_clean_name(name), status=status, detail_info=info)

    @property
    def is_deleted(self) -> bool:
        return self.status is Status.DELETED

    # --- Mutations ------------------------------------------------------------

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)

    def transition_to(self, new_status: Status) -> None:
        if new_status is self.status:
            return
        if not self.status.can_transition_to(new_status):
            raise ValidationError(
                f"{self.RESOURCE} cannot move from {self.status.label} "
                f"to {new_status.label}"
            )
        self.status = new_status

    def guard_update(
        self, has_field_changes: bool, new_status: Status | None = None
    ) -> None:
        """Reject updates the current status does not allow."""
        if has_field_changes and not self.status.can_be_updated:
            raise ValidationError(
                f"{self.RESOURCE} cannot be updated while {self.status.label}"
            )
        if not has_field_changes and new_status is self.status:
            raise ValidationError(
                f"{self.RESOURCE} status is already {self.status.label}"
            )

    def update_detail_info(self, payload: dict, actor: str, at: datetime | None = None) -> None:
        self.detail_info = self.detail_info.merged(payload).stamped(
            "updated", actor, at or _now()
        )

    def mark_as_deleted(self, actor: str = "system", at: datetime | None = None) -> None:
        if not self.status.can_be_deleted:
            raise ValidationError(
                f"{self.RESOURCE} #{self.id} is {self.status.label} and cannot be deleted"
            )
        self.status = Status.DELETED
        self.detail_info = self.detail_info.stamped("deleted", actor, at or _now())

    def restore(self, actor: str = "system", at: datetime | None = None) -> None:
        """Bring a deleted product back as a draft."""
        if not self.is_deleted:
            raise ValidationError(f"{self.RESOURCE} #{self.id} is not deleted")
        self.status = Status.DRAFT
        self.detail_info = self.detail_info.stamped("restored", actor, at or _now())

    # --- Optimistic locking ---------------------------------------------------

    def verify_lock_version(self, expected: int) -> None:
        if self.lock_version != LockVersion(expected):
            raise OptimisticLockError(
                f"{self.RESOURCE} #{self.id} was modified by another process "
                f"(expected version {expected}, current {self.lock_version})"
            )

    def upgrade_lock_version(self) -> None:
        self.lock_version = self.lock_version.increment()

"""Lifecycle status shared by catalog resources."""

from __future__ import annotations

from enum import IntEnum

from catalog.domain.exceptions import ValidationError


class Status(IntEnum):
    INACTIVE = 0
    ACTIVE = 1
    DRAFT = 2
    COMPLETED = 3
    DELETED = 4
    MAINTENANCE = 5
    APPROVED = 6
    REJECTED = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, raw: str | int) -> Status:
        """Accept a status name ("draft") or its integer value."""
        if isinstance(raw, int) or (isinstance(raw, str) and raw.isdigit()):
            try:
                return cls(int(raw))
            except ValueError as exc:
                raise ValidationError(f"Unknown status: {raw!r}") from exc
        try:
            return cls[str(raw).strip().upper()]
        except KeyError as exc:
            raise ValidationError(f"Unknown status: {raw!r}") from exc

    # --- Business rules -------------------------------------------------------

    def can_transition_to(self, other: Status) -> bool:
        return other in _ALLOWED_TRANSITIONS.get(self, frozenset())

    @property
    def can_be_updated(self) -> bool:
        return self in _ALLOWED_TRANSITIONS

    @property
    def can_be_deleted(self) -> bool:
        return self is not Status.ACTIVE

    @property
    def is_valid_for_creation(self) -> bool:
        return self in (Status.ACTIVE, Status.DRAFT)

    @property
    def is_locked(self) -> bool:
        return self in (Status.COMPLETED, Status.DELETED, Status.REJECTED)


_ALLOWED_TRANSITIONS: dict[Status, frozenset[Status]] = {
    Status.DRAFT: frozenset(
        {Status.INACTIVE, Status.ACTIVE, Status.DELETED, Status.MAINTENANCE}
    ),
    Status.ACTIVE: frozenset({Status.COMPLETED, Status.APPROVED, Status.REJECTED}),
    Status.INACTIVE: frozenset({Status.ACTIVE, Status.DRAFT, Status.DELETED}),
    Status.MAINTENANCE: frozenset(
        {Status.INACTIVE, Status.ACTIVE, Status.DRAFT, Status.DELETED}
    ),
    Status.APPROVED: frozenset({Status.COMPLETED, Status.APPROVED, Status.REJECTED}),
}

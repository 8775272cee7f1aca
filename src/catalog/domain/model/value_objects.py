"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from catalog.domain.exceptions import ValidationError

AUDIT_EVENTS = ("created", "updated", "deleted", "restored")


@dataclass(frozen=True)
class LockVersion:
    """Version counter used for optimistic locking.

    Every successful update bumps the version; a writer holding a stale
    version is rejected instead of silently overwriting newer data.
    """

    value: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Lock version must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(
                f"Lock version cannot be negative, got {self.value}"
            )

    def increment(self) -> LockVersion:
        return LockVersion(self.value + 1)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DetailInfo:
    """Free-form product attributes plus an audit change log.

    The ``change_log`` key is reserved: it is maintained through
    :meth:`stamped` and never overwritten by caller payloads.
    """

    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self.data

    @property
    def change_log(self) -> dict[str, Any]:
        return dict(self.data.get("change_log") or {})

    def merged(self, payload: dict[str, Any]) -> DetailInfo:
        """Return a copy with *payload* merged over the current data."""
        if not isinstance(payload, dict):
            raise ValidationError("Detail info must be a mapping")
        clean = {k: v for k, v in payload.items() if k != "change_log"}
        return DetailInfo({**self.data, **clean})

    def stamped(self, event: str, actor: str, at: datetime) -> DetailInfo:
        """Record who performed *event* and when."""
        if event not in AUDIT_EVENTS:
            raise ValueError(f"Unknown audit event: {event!r}")
        log = self.change_log
        log[f"{event}_at"] = at.isoformat()
        log[f"{event}_by"] = actor
        return DetailInfo({**self.data, "change_log": log})

    def to_dict(self) -> dict[str, Any]:
        return dict(self.data)

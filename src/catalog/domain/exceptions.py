"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Database failures are deliberately absent: errors raised by the MongoDB
driver (``pymongo.errors.PyMongoError``) propagate to the caller untouched.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateNameError(DomainException):
    """Another product already holds the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Product '{name}' already exists")
        self.name = name


class OptimisticLockError(DomainException):
    """The entity was modified by someone else since it was read."""

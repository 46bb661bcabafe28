"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and map them to
user-facing messages and status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotEnoughStockError(ValidationError):
    """An item does not hold enough stock for the requested quantity."""


class IllegalOrderStateError(ValidationError):
    """The order (or its delivery) is in a state that forbids the transition."""


class DuplicateMemberError(DomainException):
    """A member with the same name is already registered."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnsafePaginationError(DomainException):
    """Offset/limit was requested on a query that joins a collection."""


class AssociationNotLoadedError(DomainException):
    """An association was accessed that the read path did not load."""

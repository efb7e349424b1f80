"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

``InconsistentStateError`` is the odd one out: it is not something the caller
can fix by changing input. It means a record the catalog depends on (one of
the reserved categories) is missing from the store.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller-supplied data violates a business rule or invariant."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CategoryNotFoundError(EntityNotFoundError):
    """A category id does not resolve in the store."""


class ProductNotFoundError(EntityNotFoundError):
    """A product id does not resolve to an active product."""


class InconsistentStateError(DomainException):
    """A record the catalog depends on is missing from the store."""

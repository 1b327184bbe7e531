class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidArgumentError(ValidationError):
    """Raised when a caller-supplied id disagrees with the payload or a required link is missing."""


class NotFoundError(DomainError):
    """Raised when an id does not resolve to any row."""


class ConflictError(DomainError):
    """Raised for duplicate links and concurrent modifications."""


class DuplicateKeyError(ConflictError):
    """Raised by repositories when the store rejects a row on a unique key."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class MissingReferenceError(NotFoundError):
    """Raised by repositories when a foreign key points at no row."""

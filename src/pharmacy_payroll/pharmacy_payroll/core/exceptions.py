class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when the caller lacks ownership or role for an action."""


class InvalidStateError(DomainError):
    """Raised when an operation is not allowed from the record's current status."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""

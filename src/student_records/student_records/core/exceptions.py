class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class CorruptedStateError(DomainError):
    """Raised when a persisted payload cannot be decoded.

    Never leaves the persistence layer: callers discard the entry and fall back
    to defaults.
    """

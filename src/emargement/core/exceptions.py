class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConflictError(ValidationError):
    """Raised when a unique value (email) is already taken."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class TokenError(DomainError):
    """Raised when a bearer token is missing, malformed or expired."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a requested row does not exist."""


class StoreError(DomainError):
    """Raised when the underlying database call fails."""

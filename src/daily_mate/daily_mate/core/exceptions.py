class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no user is logged in."""


class NotFoundError(DomainError):
    """Raised when a resource does not exist or is not owned by the requester."""


class ConflictError(DomainError):
    """Raised when a write collides with an existing record (e.g. same day twice)."""

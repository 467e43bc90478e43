class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransitionError(ValidationError):
    """Raised when a leave request is moved out of a terminal status."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

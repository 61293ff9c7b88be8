class DomainError(Exception):
    """Base domain error."""


class InvalidPaginationError(DomainError, ValueError):
    """Raised when pagination parameters are invalid."""

"""Domain exceptions mapped to HTTP responses by the API layer."""


class DomainError(Exception):
    """Base class for errors raised by application services."""


class InvalidInputError(DomainError):
    """A request is missing a value or carries a malformed one."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class NotFoundError(DomainError):
    """A referenced user or record does not exist."""


class EstimationError(DomainError):
    """The AI provider failed or returned unusable nutrition data."""


class PersistenceError(DomainError):
    """The database did not confirm a write."""

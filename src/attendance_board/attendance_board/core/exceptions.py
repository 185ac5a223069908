class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnconfiguredError(DomainError):
    """Raised when no column mapping has been saved yet."""


class RemoteApiError(DomainError):
    """Raised when the board API cannot be reached or answers with an HTTP error."""


class SubmissionInProgressError(DomainError):
    """Raised when a submission for the same employee is still running."""


class LocationUnavailableError(DomainError):
    """Raised by a location source when no position can be produced."""

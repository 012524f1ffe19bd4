"""Custom exceptions for batch evaluation failures."""


class BatchError(Exception):
    """Base exception for batch errors."""


class BatchInputError(BatchError):
    """Raised when a batch input file cannot be parsed."""

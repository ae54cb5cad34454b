"""Custom exceptions for payload conversion."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataValidationError(DataError):
    """Raised when payload content fails structural validation."""

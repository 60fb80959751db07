"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileOperationError(BaseAppError):
    """Exception raised when a filesystem operation fails."""

    pass


class InvalidInputError(BaseAppError):
    """Exception raised for malformed or unknown shell commands."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass

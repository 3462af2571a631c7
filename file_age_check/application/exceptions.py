"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class ConfigurationError(ApplicationError):
    """Raised when command-line configuration is invalid."""


class FileAccessError(ApplicationError):
    """Raised when the checked file cannot be inspected."""

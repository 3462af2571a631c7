"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidDurationError(DomainError, ValueError):
    """Raised when a duration string cannot be parsed."""


class InvalidTimeModeError(DomainError, ValueError):
    """Raised when a time mode name is not recognised."""

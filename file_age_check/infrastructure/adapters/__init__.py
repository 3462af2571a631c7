"""Infrastructure adapters - Implementations of application ports."""

from .filesystem import StatTimestampReader

__all__ = ["StatTimestampReader"]

"""Application ports - Interfaces for external adapters."""

from .timestamp_reader import TimestampReader

__all__ = ["TimestampReader"]

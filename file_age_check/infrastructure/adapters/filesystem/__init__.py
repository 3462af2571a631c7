"""Filesystem adapters."""

from .stat_reader import StatTimestampReader

__all__ = ["StatTimestampReader"]

"""Severity value object."""

from enum import IntEnum


class Severity(IntEnum):
    """Plugin status severity; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def label(self) -> str:
        """Prefix printed in front of the status message."""
        return f"{self.name}:"

    def __str__(self) -> str:
        return self.name

"""Status entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from ..value_objects import Severity


@dataclass(frozen=True, slots=True)
class Status:
    """A check outcome: a severity and the message reported with it."""

    severity: Severity
    message: str

    @property
    def line(self) -> str:
        """The single output line, e.g. ``WARNING: File: /x is older than 24h0m0s``."""
        return f"{self.severity.label} {self.message}"

    @property
    def exit_code(self) -> int:
        """Process exit code for this status."""
        return int(self.severity)

    def is_worse_than(self, other: Status) -> bool:
        """Check if this status is strictly more severe than ``other``."""
        return self.severity > other.severity

    @classmethod
    def ok(cls, message: str) -> Self:
        """Create an OK status."""
        return cls(Severity.OK, message)

    @classmethod
    def warning(cls, message: str) -> Self:
        """Create a WARNING status."""
        return cls(Severity.WARNING, message)

    @classmethod
    def critical(cls, message: str) -> Self:
        """Create a CRITICAL status."""
        return cls(Severity.CRITICAL, message)

    @classmethod
    def unknown(cls, message: str) -> Self:
        """Create an UNKNOWN status."""
        return cls(Severity.UNKNOWN, message)

"""Domain value objects - Immutable objects defined by their attributes."""

from .duration import Duration
from .severity import Severity
from .thresholds import AgeThresholds
from .time_mode import TimeMode

__all__ = [
    "AgeThresholds",
    "Duration",
    "Severity",
    "TimeMode",
]

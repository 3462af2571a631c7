"""Domain entities - Values captured or produced during a check run."""

from .status import Status
from .timestamp_snapshot import TimestampSnapshot

__all__ = [
    "Status",
    "TimestampSnapshot",
]

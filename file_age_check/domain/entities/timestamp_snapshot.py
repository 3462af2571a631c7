"""Timestamp snapshot entity."""

from dataclasses import dataclass
from datetime import UTC, datetime

from ..value_objects import TimeMode


@dataclass(frozen=True, slots=True)
class TimestampSnapshot:
    """The three filesystem timestamps of a file, in epoch nanoseconds."""

    access_ns: int
    modify_ns: int
    change_ns: int

    def select(self, mode: TimeMode) -> int:
        """Return the timestamp governed by ``mode``."""
        match mode:
            case TimeMode.ACCESS_TIME:
                return self.access_ns
            case TimeMode.MODIFY_TIME:
                return self.modify_ns
            case TimeMode.CHANGE_TIME:
                return self.change_ns

    def as_datetime(self, mode: TimeMode) -> datetime:
        """Return the selected timestamp as an aware UTC datetime."""
        seconds, nanos = divmod(self.select(mode), 1_000_000_000)
        return datetime.fromtimestamp(seconds, UTC).replace(microsecond=nanos // 1_000)

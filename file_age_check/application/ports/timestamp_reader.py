"""Port for reading file timestamps - driven/secondary port."""

from typing import Protocol

from ...domain.entities import TimestampSnapshot


class TimestampReader(Protocol):
    """
    Port for capturing a file's timestamps.

    This is a driven (secondary) port that defines how the application
    obtains filesystem metadata for the checked file.
    """

    def read(self, path: str) -> TimestampSnapshot:
        """
        Capture access, modify and change times of ``path``.

        Returns:
            Snapshot of the file's timestamps.

        Raises:
            FileAccessError: If the file cannot be inspected.
        """
        ...

"""Timestamp reader backed by ``os.stat``."""

from __future__ import annotations

import logging
import os

from ....application.exceptions import FileAccessError
from ....domain.entities import TimestampSnapshot

logger = logging.getLogger(__name__)


class StatTimestampReader:
    """
    Timestamp reader using ``os.stat``.

    Implements the TimestampReader port. Symlinks are followed, and the
    nanosecond stat fields are used so sub-second precision is kept where
    the filesystem records it.
    """

    def read(self, path: str) -> TimestampSnapshot:
        """
        Stat ``path`` and capture its timestamps.

        Raises:
            FileAccessError: If the stat call fails for any reason.
        """
        try:
            result = os.stat(path)
        except (OSError, ValueError) as e:
            reason = getattr(e, "strerror", None) or str(e)
            logger.debug("stat(%s) failed: %r", path, e)
            msg = f"File: {path}: {reason}"
            raise FileAccessError(msg) from e

        return TimestampSnapshot(
            access_ns=result.st_atime_ns,
            modify_ns=result.st_mtime_ns,
            change_ns=result.st_ctime_ns,
        )

"""Use case for checking a file's age against thresholds."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from ...domain.entities import Status, TimestampSnapshot
from ...domain.services import AgeEvaluator, StatusAggregator
from ...domain.value_objects import AgeThresholds, TimeMode
from ..ports import TimestampReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of the file age check use case."""

    status: Status
    candidates: tuple[Status, ...]
    snapshot: TimestampSnapshot
    checked_at_ns: int


class CheckFileAge:
    """
    Use case for checking how old a file is.

    Reads the file's timestamps through the reader port, evaluates them
    against the thresholds and reduces the outcome to a single status.
    """

    def __init__(
        self,
        timestamp_reader: TimestampReader,
        path: str,
        thresholds: AgeThresholds,
        time_mode: TimeMode,
        *,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        """
        Initialize the use case.

        Args:
            timestamp_reader: Adapter capturing file timestamps.
            path: File to check.
            thresholds: Warning and critical age thresholds.
            time_mode: Which timestamp to compare.
            clock: Returns the current time in epoch nanoseconds.
        """
        self._reader = timestamp_reader
        self._path = path
        self._time_mode = time_mode
        self._evaluator = AgeEvaluator(thresholds, time_mode)
        self._aggregator = StatusAggregator()
        self._clock = clock

    def execute(self) -> CheckResult:
        """
        Execute the file age check.

        Returns:
            CheckResult with the reported status and its candidates.

        Raises:
            FileAccessError: If the file cannot be inspected.
        """
        logger.debug("Checking %s using %s", self._path, self._time_mode)

        snapshot = self._reader.read(self._path)
        now_ns = self._clock()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Selected timestamp: %s", snapshot.as_datetime(self._time_mode).isoformat())

        candidates = tuple(self._evaluator.evaluate(self._path, snapshot, now_ns))
        status = self._aggregator.aggregate(AgeEvaluator.baseline(self._path), candidates)
        logger.info("Check complete: %s (%d candidates)", status.severity, len(candidates))

        return CheckResult(
            status=status,
            candidates=candidates,
            snapshot=snapshot,
            checked_at_ns=now_ns,
        )

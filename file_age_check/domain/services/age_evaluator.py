"""Domain service comparing file timestamps against age thresholds."""

from ..entities import Status, TimestampSnapshot
from ..value_objects import AgeThresholds, TimeMode


class AgeEvaluator:
    """Domain service producing candidate statuses for a file's age."""

    def __init__(self, thresholds: AgeThresholds, time_mode: TimeMode) -> None:
        """Initialize evaluator with thresholds and the timestamp to compare."""
        self._thresholds = thresholds
        self._time_mode = time_mode

    def evaluate(self, path: str, snapshot: TimestampSnapshot, now_ns: int) -> list[Status]:
        """
        Check the selected timestamp against each threshold tier.

        The tiers are independent: a file past the critical boundary also
        yields a warning candidate when it is past the warning boundary.

        Args:
            path: File path used in the status messages.
            snapshot: Timestamps captured from the file.
            now_ns: Evaluation instant in epoch nanoseconds.

        Returns:
            Candidate statuses in evaluation order (warning, then critical).
        """
        timestamp = snapshot.select(self._time_mode)
        warning = self._thresholds.warning
        critical = self._thresholds.critical

        candidates: list[Status] = []
        if timestamp < now_ns - warning.nanoseconds:
            candidates.append(Status.warning(f"File: {path} is older than {warning}"))
        if timestamp < now_ns - critical.nanoseconds:
            candidates.append(Status.critical(f"File: {path} is older than {critical}"))
        return candidates

    @staticmethod
    def baseline(path: str) -> Status:
        """Status reported when no threshold is breached."""
        return Status.ok(f"File: {path}: OK")

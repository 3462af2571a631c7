"""Domain service reducing candidate statuses to the reported one."""

from collections.abc import Iterable

from ..entities import Status


class StatusAggregator:
    """Picks the most severe status out of a run's candidates."""

    def aggregate(self, base: Status, candidates: Iterable[Status]) -> Status:
        """
        Reduce candidates onto ``base``.

        A candidate replaces the running status (severity and message) only
        when it is strictly more severe, so on ties the earlier message wins
        and the result is never less severe than ``base``.
        """
        current = base
        for candidate in candidates:
            if candidate.is_worse_than(current):
                current = candidate
        return current

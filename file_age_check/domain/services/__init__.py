"""Domain services - Stateless operations on domain objects."""

from .age_evaluator import AgeEvaluator
from .status_aggregator import StatusAggregator

__all__ = ["AgeEvaluator", "StatusAggregator"]

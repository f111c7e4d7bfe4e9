"""Aggregation passes that turn a raw result matrix into a categorized view.

``aggregate()`` is the entry point; the individual passes are exported for
callers that need to run or test them separately.
"""

from scansummary.aggregate.aggregator import aggregate
from scansummary.aggregate.index import build_target_index
from scansummary.aggregate.normalize import Normalization, normalize_results
from scansummary.aggregate.rules import aggregate_rules
from scansummary.aggregate.targets import aggregate_targets

__all__ = [
    "aggregate",
    "Normalization",
    "normalize_results",
    "build_target_index",
    "aggregate_rules",
    "aggregate_targets",
]

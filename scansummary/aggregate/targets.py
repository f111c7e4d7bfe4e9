"""Target-centric pass: partition rules per target and classify each target."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from scansummary.logging import get_logger
from scansummary.types.base import CATEGORY_COUNT, Outcome, rollup_category

if TYPE_CHECKING:
    from scansummary.model.report import ReportModel

logger = get_logger(__name__)


def aggregate_targets(model: ReportModel) -> List[int]:
    """Fill ``rules_by_result`` and ``category`` on every target.

    Rule positions are bucketed by outcome in rule order. Expects a normalized
    model.

    Returns:
        Targets per category, also stored as ``model.target_result_totals``.
    """
    totals = [0] * CATEGORY_COUNT
    for target in model.targets:
        buckets = {outcome: [] for outcome in Outcome}
        for position, outcome in enumerate(target.rule_results or []):
            buckets[outcome].append(position)
        target.rules_by_result = buckets
        target.category = rollup_category([len(buckets[o]) for o in Outcome])
        totals[target.category] += 1

    model.target_result_totals = totals
    logger.debug("Target categories: %s", totals)
    return totals

"""Rule-centric pass: partition targets per rule and classify each rule."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from scansummary.logging import get_logger
from scansummary.types.base import CATEGORY_COUNT, OUTCOME_COUNT, Outcome, rollup_category

if TYPE_CHECKING:
    from scansummary.model.report import ReportModel

logger = get_logger(__name__)


def aggregate_rules(model: ReportModel) -> List[int]:
    """Fill ``targets_by_result`` and ``category`` on every rule.

    Targets are bucketed by the outcome they recorded for the rule, in target
    order. The rule's category comes from its ``result_totals``. Expects a
    normalized model.

    Returns:
        Rules per category, also stored as ``model.rule_result_totals``.
    """
    totals = [0] * CATEGORY_COUNT
    for rule in model.rules:
        rule.targets_by_result = {outcome: [] for outcome in Outcome}

    for target in model.targets:
        for position, outcome in enumerate(target.rule_results or []):
            model.rules[position].targets_by_result[outcome].append(
                target.friendly_name
            )

    for rule in model.rules:
        counts = rule.result_totals or [0] * OUTCOME_COUNT
        bucket_sizes = [len(rule.targets_by_result[o]) for o in Outcome]
        if list(counts) != bucket_sizes:
            logger.warning(
                "Rule '%s' result_totals %s disagree with target results %s",
                rule.id,
                list(counts),
                bucket_sizes,
            )
        rule.category = rollup_category(counts)
        totals[rule.category] += 1

    model.rule_result_totals = totals
    logger.debug("Rule categories: %s", totals)
    return totals

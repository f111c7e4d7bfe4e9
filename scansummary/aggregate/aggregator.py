"""Result aggregator: run the normalize, index, rule and target passes in order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from scansummary.aggregate.index import build_target_index
from scansummary.aggregate.normalize import normalize_results
from scansummary.aggregate.rules import aggregate_rules
from scansummary.aggregate.targets import aggregate_targets
from scansummary.config import DEFAULT_CONFIG, AggregationConfig
from scansummary.logging import get_logger
from scansummary.types.base import OUTCOME_COUNT, Category

if TYPE_CHECKING:
    from scansummary.model.report import ReportModel

logger = get_logger(__name__)


def _derive_missing_totals(model: ReportModel) -> None:
    """Count ``result_totals`` from evaluated targets for rules that lack them."""
    for position, rule in enumerate(model.rules):
        if rule.result_totals is not None:
            continue
        totals = [0] * OUTCOME_COUNT
        for target in model.targets:
            if target.rule_results is not None:
                totals[target.rule_results[position].index] += 1
        rule.result_totals = totals
        logger.debug("Derived result_totals for rule '%s': %s", rule.id, totals)


def aggregate(
    model: ReportModel, config: Optional[AggregationConfig] = None
) -> ReportModel:
    """Aggregate a report model in place and return it.

    Steps:
      1. Validate result vector lengths and build the target name index.
      2. Derive ``result_totals`` for rules whose document omitted them.
      3. Normalize unevaluated targets (see :mod:`scansummary.aggregate.normalize`).
      4. Rule-centric pass.
      5. Target-centric pass.

    Running it again on the returned model yields the same derived data.

    Args:
        model: Model built from a summary document.
        config: Aggregation policy; defaults to :data:`DEFAULT_CONFIG`.

    Raises:
        MalformedResultError: If a target's results do not match the rules.
        DuplicateTargetNameError: On a repeated target name under the default
            duplicate policy.
    """
    cfg = config or DEFAULT_CONFIG
    logger.debug(
        "Aggregating %d rules across %d targets", len(model.rules), len(model.targets)
    )

    model.validate()
    # Built before any mutation so a duplicate name leaves the model untouched
    target_index = build_target_index(
        model.targets, duplicates=cfg.duplicate_targets
    )

    _derive_missing_totals(model)

    normalization = normalize_results(
        model.rules, model.targets, outcome=cfg.missing_outcome
    )
    normalization.apply(model)

    model.target_index = target_index

    rule_totals = aggregate_rules(model)
    target_totals = aggregate_targets(model)

    logger.info(
        "Rules: %s",
        ", ".join(f"{c.label}={rule_totals[c]}" for c in Category),
    )
    logger.info(
        "Targets: %s",
        ", ".join(f"{c.label}={target_totals[c]}" for c in Category),
    )
    return model

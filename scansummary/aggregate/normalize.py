"""Fill in results for targets that could not be evaluated.

A target without ``rule_results`` (for example after a connection error) is
treated as having produced the missing outcome, ``ERROR`` by default, for every
rule. The matching rule counters must move with it, so the normalizer reports
both the synthesized result vectors and the per-rule counter deltas.
:func:`normalize_results` computes them without touching the model;
:meth:`Normalization.apply` writes them in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Sequence

from scansummary.exceptions import MalformedResultError
from scansummary.logging import get_logger
from scansummary.types.base import OUTCOME_COUNT, Outcome

if TYPE_CHECKING:
    from scansummary.model.report import ReportModel, Rule, Target

logger = get_logger(__name__)


@dataclass
class Normalization:
    """Synthesized results and the rule counter changes they imply.

    Attributes:
        outcome: Outcome assigned to every rule of an unevaluated target.
        filled: Target position -> synthesized result vector.
        deltas: Per-rule increment to ``result_totals[outcome]``, in rule order.
    """

    outcome: Outcome
    filled: Dict[int, List[Outcome]] = field(default_factory=dict)
    deltas: List[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.filled

    def apply(self, model: ReportModel) -> None:
        """Write the synthesized results and counter deltas into ``model``."""
        if len(self.deltas) != len(model.rules):
            raise MalformedResultError(
                f"Normalization covers {len(self.deltas)} rules, "
                f"model has {len(model.rules)}"
            )
        for position, results in self.filled.items():
            model.targets[position].rule_results = list(results)
        for rule, delta in zip(model.rules, self.deltas):
            if not delta:
                continue
            if rule.result_totals is None:
                rule.result_totals = [0] * OUTCOME_COUNT
            rule.result_totals[self.outcome.index] += delta


def normalize_results(
    rules: Sequence[Rule],
    targets: Sequence[Target],
    outcome: Outcome = Outcome.ERROR,
) -> Normalization:
    """Compute results for every target that lacks them.

    Args:
        rules: Rules in document order.
        targets: Targets in document order.
        outcome: Outcome to synthesize.

    Returns:
        The normalization to apply. Empty when every target was evaluated.
    """
    norm = Normalization(outcome=outcome, deltas=[0] * len(rules))
    for position, target in enumerate(targets):
        if target.rule_results is not None:
            continue
        norm.filled[position] = [outcome] * len(rules)
        for i in range(len(rules)):
            norm.deltas[i] += 1
        logger.debug(
            "Target '%s' has no rule results; assigning %s to %d rules",
            target.friendly_name,
            outcome.name,
            len(rules),
        )
    if norm.filled:
        logger.info(
            "Marked %d unevaluated target(s) as %s", len(norm.filled), outcome.name
        )
    return norm

"""Report model: benchmark, rules, targets, and the derived aggregation state.

The model is built once from a parsed summary document with
:meth:`ReportModel.from_dict`, filled in by :func:`scansummary.aggregate.aggregate`,
and then treated as read-only by renderers. ``to_dict()`` exports a JSON-safe
structure that uses the document's 1-based outcome ordinals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from scansummary.exceptions import InvalidDocumentError, MalformedResultError
from scansummary.logging import get_logger
from scansummary.types.base import (
    CATEGORY_COUNT,
    OUTCOME_COUNT,
    Category,
    Outcome,
    category_counts,
)

logger = get_logger(__name__)

# Benchmark keys as they appear in summary documents
_BENCHMARK_KEYS = {
    "title": "benchmark_title",
    "version": "xccdf_version",
    "id": "xccdf_id",
    "profile_name": "profile_name",
}


def _empty_buckets() -> Dict[Outcome, list]:
    return {outcome: [] for outcome in Outcome}


@dataclass
class Reference:
    """External citation attached to a rule.

    Attributes:
        system: Reference system URI, e.g. ``http://cve.mitre.org``.
        value: Opaque identifier within that system, e.g. ``CVE-2099-0001``.
    """

    system: str
    value: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Reference:
        if not isinstance(data, Mapping):
            raise InvalidDocumentError(f"Reference must be a mapping, got {data!r}")
        return cls(system=str(data.get("system", "")), value=str(data.get("value", "")))

    def to_dict(self) -> Dict[str, Any]:
        return {"system": self.system, "value": self.value}


@dataclass
class Benchmark:
    """Benchmark metadata. Not aggregated; carried through to the renderer.

    Attributes:
        title: Benchmark title.
        version: Benchmark version as given in the document.
        profile_name: Name of the evaluated profile.
        id: Benchmark identifier.
        attrs: Any further keys from the document, preserved on export.
    """

    title: str = ""
    version: Any = None
    profile_name: str = ""
    id: str = ""
    attrs: Dict[str, Any] = field(default_factory=dict)

    @property
    def display_title(self) -> str:
        """Title followed by the version when the version is a positive number."""
        try:
            show_version = float(self.version) > 0
        except (TypeError, ValueError):
            show_version = False
        if show_version:
            return f"{self.title} {self.version}"
        return self.title

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Benchmark:
        known = set(_BENCHMARK_KEYS.values())
        return cls(
            title=str(data.get("benchmark_title") or ""),
            version=data.get("xccdf_version"),
            profile_name=str(data.get("profile_name") or ""),
            id=str(data.get("xccdf_id") or ""),
            attrs={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.attrs)
        out.update(
            {
                "benchmark_title": self.title,
                "xccdf_version": self.version,
                "xccdf_id": self.id,
                "profile_name": self.profile_name,
            }
        )
        return out


@dataclass
class Rule:
    """A benchmark rule and its per-outcome target counts.

    Attributes:
        id: Rule identifier.
        title: Display title.
        description: Free-text description.
        references: External citations, in document order.
        result_totals: Targets per outcome, indexed by ``Outcome.index``.
            ``None`` until derived when the document omits it.
        targets_by_result: Derived. Target names per outcome, in target order.
        category: Derived. Rollup category of the rule.
    """

    id: str
    title: str = ""
    description: str = ""
    references: List[Reference] = field(default_factory=list)
    result_totals: Optional[List[int]] = None
    targets_by_result: Dict[Outcome, List[str]] = field(default_factory=_empty_buckets)
    category: Optional[Category] = None

    def __post_init__(self) -> None:
        if self.result_totals is not None and len(self.result_totals) != OUTCOME_COUNT:
            raise MalformedResultError(
                f"Rule '{self.id}' result_totals must have {OUTCOME_COUNT} entries, "
                f"got {len(self.result_totals)}",
                rule_id=self.id,
            )

    @property
    def category_counts(self) -> List[int]:
        """Pass, fail, unknown-group and not-applicable-group target counts."""
        return category_counts(self.result_totals or [0] * OUTCOME_COUNT)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rule:
        if not isinstance(data, Mapping):
            raise InvalidDocumentError(f"Rule must be a mapping, got {data!r}")
        rule_id = str(data.get("id", ""))
        totals = data.get("result_totals")
        if totals is not None:
            if not isinstance(totals, list) or not all(
                isinstance(n, int) and not isinstance(n, bool) and n >= 0
                for n in totals
            ):
                raise MalformedResultError(
                    f"Rule '{rule_id}' result_totals must be a list of "
                    f"non-negative ints, got {totals!r}",
                    rule_id=rule_id,
                )
            totals = list(totals)
        return cls(
            id=rule_id,
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            references=[Reference.from_dict(r) for r in data.get("references") or []],
            result_totals=totals,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "references": [r.to_dict() for r in self.references],
            "result_totals": list(self.result_totals or [0] * OUTCOME_COUNT),
            "targets_by_result": [list(self.targets_by_result[o]) for o in Outcome],
            "category": self.category.name if self.category is not None else None,
        }


@dataclass
class Target:
    """A scanned target and the outcome recorded for each rule.

    Attributes:
        friendly_name: Human-facing key; unique across targets for cross-links.
        status_detail: Diagnostic summary, usually present only on failure.
        error_trace: Diagnostic trace, usually present only on failure.
        rule_results: One outcome per rule, in rule order. ``None`` when the
            target could not be evaluated.
        rules_by_result: Derived. Rule positions per outcome, in rule order.
        category: Derived. Rollup category of the target.
    """

    friendly_name: str
    status_detail: Optional[str] = None
    error_trace: Optional[str] = None
    rule_results: Optional[List[Outcome]] = None
    rules_by_result: Dict[Outcome, List[int]] = field(default_factory=_empty_buckets)
    category: Optional[Category] = None

    @property
    def evaluated(self) -> bool:
        return self.rule_results is not None

    @property
    def result_totals(self) -> List[int]:
        """Rules per outcome for this target, indexed by ``Outcome.index``."""
        totals = [0] * OUTCOME_COUNT
        for outcome in self.rule_results or []:
            totals[outcome.index] += 1
        return totals

    @property
    def category_counts(self) -> List[int]:
        return category_counts(self.result_totals)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], rule_ids: Optional[List[str]] = None
    ) -> Target:
        """Build a target, converting 1-based ordinals to :class:`Outcome`.

        Args:
            data: Target mapping from the summary document.
            rule_ids: Rule identifiers by position, used in error messages.

        Raises:
            MalformedResultError: If an ordinal is not an int in ``[1, 8]``.
        """
        if not isinstance(data, Mapping):
            raise InvalidDocumentError(f"Target must be a mapping, got {data!r}")
        name = str(data.get("friendly_name", ""))
        raw = data.get("rule_results")
        results: Optional[List[Outcome]] = None
        if raw is not None:
            if not isinstance(raw, list):
                raise MalformedResultError(
                    f"Target '{name}' rule_results must be a list",
                    target_name=name,
                )
            results = []
            for position, ordinal in enumerate(raw):
                try:
                    results.append(Outcome.from_ordinal(ordinal))
                except ValueError as exc:
                    rule_id = (
                        rule_ids[position]
                        if rule_ids is not None and position < len(rule_ids)
                        else None
                    )
                    raise MalformedResultError(
                        f"Target '{name}' has invalid result for rule "
                        f"'{rule_id if rule_id is not None else position}': {exc}",
                        rule_id=rule_id,
                        target_name=name,
                    ) from exc
        return cls(
            friendly_name=name,
            status_detail=data.get("status_detail"),
            error_trace=data.get("error_trace"),
            rule_results=results,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"friendly_name": self.friendly_name}
        if self.status_detail:
            out["status_detail"] = self.status_detail
        if self.error_trace:
            out["error_trace"] = self.error_trace
        out["rule_results"] = (
            [int(o) for o in self.rule_results] if self.rule_results is not None else None
        )
        out["rules_by_result"] = [list(self.rules_by_result[o]) for o in Outcome]
        out["category"] = self.category.name if self.category is not None else None
        return out


@dataclass
class ReportModel:
    """Root of the report: benchmark, rules, targets, and summary vectors.

    Attributes:
        benchmark: Benchmark metadata.
        rules: Rules in document order.
        targets: Targets in document order.
        rule_result_totals: Derived. Rules per rollup category.
        target_result_totals: Derived. Targets per rollup category.
        target_index: Derived. Target ``friendly_name`` -> position.
    """

    benchmark: Benchmark
    rules: List[Rule] = field(default_factory=list)
    targets: List[Target] = field(default_factory=list)
    rule_result_totals: List[int] = field(default_factory=lambda: [0] * CATEGORY_COUNT)
    target_result_totals: List[int] = field(
        default_factory=lambda: [0] * CATEGORY_COUNT
    )
    target_index: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReportModel:
        """Construct a model from a parsed summary document.

        Raises:
            InvalidDocumentError: If ``benchmark``, ``rules`` or ``targets`` is
                missing or has the wrong container type.
            MalformedResultError: If a result entry is invalid.
        """
        if not isinstance(data, Mapping):
            raise InvalidDocumentError("Summary document must be a mapping")
        missing = [k for k in ("benchmark", "rules", "targets") if k not in data]
        if missing:
            raise InvalidDocumentError(
                f"Summary document is missing required section(s): {', '.join(missing)}"
            )
        if not isinstance(data["benchmark"], Mapping):
            raise InvalidDocumentError("'benchmark' must be a mapping")
        for key in ("rules", "targets"):
            if not isinstance(data[key], list):
                raise InvalidDocumentError(f"'{key}' must be a list")

        rules = [Rule.from_dict(r) for r in data["rules"]]
        rule_ids = [r.id for r in rules]
        targets = [Target.from_dict(t, rule_ids) for t in data["targets"]]
        logger.debug(
            "Built report model with %d rules and %d targets", len(rules), len(targets)
        )
        return cls(
            benchmark=Benchmark.from_dict(data["benchmark"]),
            rules=rules,
            targets=targets,
        )

    def validate(self) -> None:
        """Check that every evaluated target has exactly one result per rule.

        Raises:
            MalformedResultError: On a length mismatch.
        """
        expected = len(self.rules)
        for target in self.targets:
            if target.rule_results is None:
                continue
            if len(target.rule_results) != expected:
                raise MalformedResultError(
                    f"Target '{target.friendly_name}' has {len(target.rule_results)} "
                    f"rule results, expected {expected}",
                    target_name=target.friendly_name,
                )
            for position, outcome in enumerate(target.rule_results):
                if not isinstance(outcome, Outcome):
                    raise MalformedResultError(
                        f"Target '{target.friendly_name}' has non-outcome result "
                        f"{outcome!r} for rule '{self.rules[position].id}'",
                        rule_id=self.rules[position].id,
                        target_name=target.friendly_name,
                    )

    def rule_for(self, position: int) -> Rule:
        """Rule at ``position``; used for target-to-rule links."""
        return self.rules[position]

    def target_for(self, name: str) -> Target:
        """Target with ``friendly_name``; used for rule-to-target links.

        Raises:
            KeyError: If the name is not in the index.
        """
        return self.targets[self.target_index[name]]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe export of the model and its derived data."""
        return {
            "benchmark": self.benchmark.to_dict(),
            "rules": [r.to_dict() for r in self.rules],
            "targets": [t.to_dict() for t in self.targets],
            "rule_result_totals": list(self.rule_result_totals),
            "target_result_totals": list(self.target_result_totals),
            "target_index": dict(self.target_index),
        }

"""Global pytest configuration and shared summary fixtures.

`make_summary` builds a summary document from a compact outcome matrix so
tests can describe scenarios as rows of outcomes per target.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

import pytest

from scansummary.model.report import ReportModel
from scansummary.types.base import OUTCOME_COUNT, Outcome


def build_summary(
    matrix: Dict[str, Optional[Sequence[Outcome]]],
    n_rules: Optional[int] = None,
    with_totals: bool = True,
) -> Dict[str, Any]:
    """Return a summary document for ``{target_name: outcomes-per-rule}``.

    ``None`` outcomes mark an unevaluated target. Rule ``result_totals`` are
    counted from evaluated targets, the way a scanner would emit them.
    """
    if n_rules is None:
        n_rules = max((len(r) for r in matrix.values() if r is not None), default=0)
    rules: List[Dict[str, Any]] = []
    for i in range(n_rules):
        rule: Dict[str, Any] = {
            "id": f"rule{i + 1}",
            "title": f"Rule {i + 1}",
            "description": f"Checks setting {i + 1}",
            "references": [],
        }
        if with_totals:
            totals = [0] * OUTCOME_COUNT
            for results in matrix.values():
                if results is not None:
                    totals[results[i].index] += 1
            rule["result_totals"] = totals
        rules.append(rule)
    targets = []
    for name, results in matrix.items():
        target: Dict[str, Any] = {"friendly_name": name}
        if results is not None:
            target["rule_results"] = [int(o) for o in results]
        else:
            target["status_detail"] = "Connection refused"
        targets.append(target)
    return {
        "benchmark": {
            "benchmark_title": "Example Benchmark",
            "xccdf_version": "1.2",
            "xccdf_id": "xccdf_org.example_benchmark",
            "profile_name": "Baseline",
        },
        "rules": rules,
        "targets": targets,
    }


@pytest.fixture
def make_summary() -> Callable[..., Dict[str, Any]]:
    return build_summary


@pytest.fixture
def make_model() -> Callable[..., ReportModel]:
    def _make(matrix, n_rules=None, with_totals=True) -> ReportModel:
        return ReportModel.from_dict(build_summary(matrix, n_rules, with_totals))

    return _make


@pytest.fixture
def mixed_summary() -> Dict[str, Any]:
    """Three rules, four targets including one that could not be evaluated."""
    P, F, E, U, NC, NA, NS, I = list(Outcome)
    doc = build_summary(
        {
            "web-01": [P, F, NA],
            "web-02": [P, P, NS],
            "db-01": [U, P, I],
            "db-02": None,
        }
    )
    doc["rules"][0]["references"] = [
        {"system": "http://cve.mitre.org", "value": "CVE-2099-0001"},
        {"system": "urn:internal", "value": "POL-7"},
    ]
    doc["targets"][3]["error_trace"] = "Traceback: socket timeout"
    return doc

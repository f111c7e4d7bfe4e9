"""Tabular views of an aggregated report model.

One row per rule or per target with its rollup category and the four column
counts shown in report tables: pass, fail, unknown-group (ERROR, UNKNOWN,
NOT CHECKED) and not-applicable-group (NOT APPLICABLE, NOT SELECTED,
INFORMATIONAL).
"""

from __future__ import annotations

import pandas as pd

from scansummary.model.report import ReportModel
from scansummary.types.base import Category

COUNT_COLUMNS = ["pass", "fail", "unknown", "not_applicable"]


def _require_aggregated(model: ReportModel) -> None:
    if any(r.category is None for r in model.rules) or any(
        t.category is None for t in model.targets
    ):
        raise ValueError("Report model is not aggregated. Call aggregate() first.")


def rule_rows(model: ReportModel) -> pd.DataFrame:
    """Return one row per rule, indexed by rule position."""
    _require_aggregated(model)
    rows = []
    for position, rule in enumerate(model.rules):
        row = {
            "position": position,
            "id": rule.id,
            "title": rule.title,
            "category": rule.category.name,
        }
        row.update(zip(COUNT_COLUMNS, rule.category_counts))
        row["references"] = len(rule.references)
        rows.append(row)
    columns = ["position", "id", "title", "category", *COUNT_COLUMNS, "references"]
    return pd.DataFrame(rows, columns=columns).set_index("position")


def target_rows(model: ReportModel) -> pd.DataFrame:
    """Return one row per target, indexed by target position."""
    _require_aggregated(model)
    rows = []
    for position, target in enumerate(model.targets):
        row = {
            "position": position,
            "friendly_name": target.friendly_name,
            "category": target.category.name,
        }
        row.update(zip(COUNT_COLUMNS, target.category_counts))
        row["status_detail"] = target.status_detail or ""
        rows.append(row)
    columns = ["position", "friendly_name", "category", *COUNT_COLUMNS, "status_detail"]
    return pd.DataFrame(rows, columns=columns).set_index("position")


def category_distribution(model: ReportModel) -> pd.DataFrame:
    """Rules and targets per rollup category, one row per category."""
    return pd.DataFrame(
        {
            "rules": [model.rule_result_totals[c] for c in Category],
            "targets": [model.target_result_totals[c] for c in Category],
        },
        index=pd.Index([c.name for c in Category], name="category"),
    )

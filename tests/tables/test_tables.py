"""Tests for the pandas tabular views."""

from __future__ import annotations

import pytest

from scansummary.aggregate import aggregate
from scansummary.model.report import ReportModel
from scansummary.tables import (
    COUNT_COLUMNS,
    category_distribution,
    rule_rows,
    target_rows,
)


@pytest.fixture
def model(mixed_summary) -> ReportModel:
    return aggregate(ReportModel.from_dict(mixed_summary))


def test_rule_rows(model: ReportModel) -> None:
    df = rule_rows(model)
    assert list(df.index) == [0, 1, 2]
    assert list(df["category"]) == ["UNKNOWN", "FAIL", "UNKNOWN"]
    first = df.loc[0]
    assert [first[c] for c in COUNT_COLUMNS] == [2, 0, 2, 0]
    assert first["references"] == 2
    # Each row's counts cover every target
    assert (df[COUNT_COLUMNS].sum(axis=1) == len(model.targets)).all()


def test_target_rows(model: ReportModel) -> None:
    df = target_rows(model)
    assert list(df["friendly_name"]) == ["web-01", "web-02", "db-01", "db-02"]
    assert list(df["category"]) == ["FAIL", "PASS", "UNKNOWN", "UNKNOWN"]
    assert [df.loc[3][c] for c in COUNT_COLUMNS] == [0, 0, 3, 0]
    assert df.loc[3]["status_detail"] == "Connection refused"
    assert (df[COUNT_COLUMNS].sum(axis=1) == len(model.rules)).all()


def test_category_distribution(model: ReportModel) -> None:
    df = category_distribution(model)
    assert list(df.index) == ["PASS", "FAIL", "UNKNOWN", "NOT_APPLICABLE"]
    assert list(df["rules"]) == [0, 1, 2, 0]
    assert list(df["targets"]) == [1, 1, 2, 0]


def test_requires_aggregated_model(mixed_summary) -> None:
    with pytest.raises(ValueError, match="not aggregated"):
        rule_rows(ReportModel.from_dict(mixed_summary))

"""Tests for the target-centric pass."""

from __future__ import annotations

from scansummary.aggregate.targets import aggregate_targets
from scansummary.types.base import Category, Outcome

P, F, E, U, NC, NA, NS, I = list(Outcome)


def test_rule_positions_bucketed_in_rule_order(make_model) -> None:
    model = make_model({"t1": [P, F, P, E, F]})
    aggregate_targets(model)
    target = model.targets[0]
    assert target.rules_by_result[P] == [0, 2]
    assert target.rules_by_result[F] == [1, 4]
    assert target.rules_by_result[E] == [3]
    assert sum(len(b) for b in target.rules_by_result.values()) == 5


def test_target_categories(make_model) -> None:
    model = make_model(
        {
            "fails": [P, P, F],
            "unknown": [P, NC, NA],
            "passes": [P, NS, I],
            "na-only": [NA, NS, I],
        }
    )
    totals = aggregate_targets(model)
    assert [t.category for t in model.targets] == [
        Category.FAIL,
        Category.UNKNOWN,
        Category.PASS,
        Category.NOT_APPLICABLE,
    ]
    assert totals == [1, 1, 1, 1]
    assert model.target_result_totals == totals


def test_target_with_no_rules_is_not_applicable(make_model) -> None:
    model = make_model({"t1": []}, n_rules=0)
    assert aggregate_targets(model) == [0, 0, 0, 1]
    assert model.targets[0].category is Category.NOT_APPLICABLE


def test_rerun_resets_buckets(make_model) -> None:
    model = make_model({"t1": [P, F]})
    aggregate_targets(model)
    aggregate_targets(model)
    assert model.targets[0].rules_by_result[P] == [0]
    assert model.target_result_totals == [0, 1, 0, 0]

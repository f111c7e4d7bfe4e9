"""scansummary: aggregate compliance scan summaries into a categorized report model.

A scan summary records, for each target, the outcome of every benchmark rule.
scansummary fills in targets that could not be evaluated, groups targets per
rule and rules per target by outcome, classifies every rule and target into
a rollup category, and indexes targets by name for cross-links.

Primary API:
    load_summary() - Read a JSON/YAML summary into a ReportModel
    aggregate() - Run the aggregation passes on a ReportModel
    ReportModel, Rule, Target, Benchmark, Reference - Report model
    Outcome, Category - Result enums

Example:
    from pathlib import Path
    from scansummary import aggregate, load_summary

    model = aggregate(load_summary(Path("summary.json")))
    print(model.rule_result_totals, model.target_result_totals)
"""

from __future__ import annotations

from scansummary import cli, logging
from scansummary._version import __version__
from scansummary.aggregate import aggregate, normalize_results
from scansummary.config import AggregationConfig
from scansummary.dsl.loader import load_summary, load_summary_text
from scansummary.exceptions import (
    DuplicateTargetNameError,
    InvalidDocumentError,
    MalformedResultError,
    ScanSummaryError,
)
from scansummary.model.report import Benchmark, Reference, ReportModel, Rule, Target
from scansummary.references import reference_html, reference_url
from scansummary.types.base import Category, Outcome, category_of, rollup_category

__all__ = [
    # Version
    "__version__",
    # Model
    "ReportModel",
    "Benchmark",
    "Rule",
    "Target",
    "Reference",
    # Types
    "Outcome",
    "Category",
    "category_of",
    "rollup_category",
    # Aggregation
    "aggregate",
    "normalize_results",
    "AggregationConfig",
    # Loading
    "load_summary",
    "load_summary_text",
    # References
    "reference_url",
    "reference_html",
    # Errors
    "ScanSummaryError",
    "InvalidDocumentError",
    "MalformedResultError",
    "DuplicateTargetNameError",
    # Utilities
    "cli",
    "logging",
]

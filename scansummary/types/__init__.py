"""Shared enums for scan outcomes and their rollup categories."""

from scansummary.types.base import (
    CATEGORY_COUNT,
    OUTCOME_COUNT,
    Category,
    Outcome,
    category_counts,
    category_of,
    rollup_category,
)

__all__ = [
    # Enums
    "Outcome",
    "Category",
    # Constants
    "OUTCOME_COUNT",
    "CATEGORY_COUNT",
    # Mapping helpers
    "category_of",
    "category_counts",
    "rollup_category",
]

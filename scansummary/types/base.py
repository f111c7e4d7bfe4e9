"""Outcome and rollup category enums for scan results."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence


class Outcome(IntEnum):
    """Result of evaluating one rule against one target.

    Values are the 1-based ordinals used by summary documents. Use
    :attr:`index` for the 0-based position in per-outcome arrays.
    """

    PASS = 1
    FAIL = 2
    ERROR = 3
    UNKNOWN = 4
    NOT_CHECKED = 5
    NOT_APPLICABLE = 6
    NOT_SELECTED = 7
    INFORMATIONAL = 8

    @property
    def index(self) -> int:
        """0-based storage position of this outcome."""
        return self.value - 1

    @property
    def label(self) -> str:
        """Display label, e.g. ``"NOT CHECKED"``."""
        return self.name.replace("_", " ")

    @property
    def category(self) -> "Category":
        return category_of(self)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Outcome":
        """Parse a 1-based document ordinal.

        Raises:
            ValueError: If ``ordinal`` is not an int in ``[1, 8]``.
        """
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise ValueError(f"Outcome ordinal must be an int, got {ordinal!r}")
        try:
            return cls(ordinal)
        except ValueError:
            raise ValueError(
                f"Outcome ordinal {ordinal} out of range [1, {len(cls)}]"
            ) from None

    @classmethod
    def from_string(cls, value: str) -> "Outcome":
        """Parse a case-insensitive outcome name (``"not checked"`` or ``"NOT_CHECKED"``).

        Raises:
            ValueError: If the string doesn't match any outcome.
        """
        try:
            return cls[value.strip().upper().replace(" ", "_")]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid outcome '{value}'. Valid values are: {valid}"
            ) from None


class Category(IntEnum):
    """Rollup category used for summary distributions.

    Values are positions in the 4-slot summary vectors.
    """

    PASS = 0
    FAIL = 1
    UNKNOWN = 2
    NOT_APPLICABLE = 3

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


#: Number of outcome variants; length of per-outcome count vectors.
OUTCOME_COUNT = len(Outcome)

#: Number of rollup categories; length of summary vectors.
CATEGORY_COUNT = len(Category)


def category_of(outcome: Outcome) -> Category:
    """Map an outcome to its rollup category."""
    if outcome is Outcome.PASS:
        return Category.PASS
    if outcome is Outcome.FAIL:
        return Category.FAIL
    if outcome in (Outcome.ERROR, Outcome.UNKNOWN, Outcome.NOT_CHECKED):
        return Category.UNKNOWN
    if outcome in (
        Outcome.NOT_APPLICABLE,
        Outcome.NOT_SELECTED,
        Outcome.INFORMATIONAL,
    ):
        return Category.NOT_APPLICABLE
    raise ValueError(f"Unhandled outcome: {outcome!r}")


def category_counts(counts: Sequence[int]) -> list[int]:
    """Fold an 8-slot per-outcome count vector into 4 category counts.

    Args:
        counts: Counts indexed by ``Outcome.index``.

    Returns:
        Counts indexed by ``Category``.
    """
    if len(counts) != OUTCOME_COUNT:
        raise ValueError(
            f"Expected {OUTCOME_COUNT} outcome counts, got {len(counts)}"
        )
    folded = [0] * CATEGORY_COUNT
    for outcome in Outcome:
        folded[category_of(outcome)] += counts[outcome.index]
    return folded


def rollup_category(counts: Sequence[int]) -> Category:
    """Classify a rule or target from its per-outcome counts.

    First match wins: any FAIL, then any ERROR/UNKNOWN/NOT_CHECKED, then any
    PASS. Everything else, including an all-zero vector, is NOT_APPLICABLE.

    Args:
        counts: Counts indexed by ``Outcome.index``.
    """
    folded = category_counts(counts)
    if folded[Category.FAIL] > 0:
        return Category.FAIL
    if folded[Category.UNKNOWN] > 0:
        return Category.UNKNOWN
    if folded[Category.PASS] > 0:
        return Category.PASS
    return Category.NOT_APPLICABLE

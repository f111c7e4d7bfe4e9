"""Error types raised while loading or aggregating scan summaries.

All errors derive from ``ValueError`` so callers that already guard input
parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class ScanSummaryError(ValueError):
    """Base class for scansummary errors."""


class InvalidDocumentError(ScanSummaryError):
    """The summary document is missing required sections or has the wrong shape."""


class MalformedResultError(ScanSummaryError):
    """A result entry cannot be interpreted.

    Attributes:
        rule_id: Identifier of the offending rule, when known.
        target_name: Friendly name of the offending target, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        rule_id: Optional[str] = None,
        target_name: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.rule_id = rule_id
        self.target_name = target_name


class DuplicateTargetNameError(ScanSummaryError):
    """Two targets share a ``friendly_name`` and cannot be cross-linked.

    Attributes:
        name: The duplicated friendly name.
        first: Position of the first target with that name.
        second: Position of the later target with that name.
    """

    def __init__(self, name: str, first: int, second: int) -> None:
        super().__init__(
            f"Duplicate target friendly_name '{name}' at positions {first} and {second}"
        )
        self.name = name
        self.first = first
        self.second = second

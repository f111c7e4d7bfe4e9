"""Configuration for the result aggregator."""

from dataclasses import dataclass

from scansummary.types.base import Outcome

#: Raise ``DuplicateTargetNameError`` when two targets share a name.
DUPLICATES_ERROR = "error"

#: Keep the later target's position in the index and log a warning.
DUPLICATES_LAST_WINS = "last_wins"


@dataclass(frozen=True)
class AggregationConfig:
    """Policy knobs for :func:`scansummary.aggregate.aggregate`."""

    # How to treat targets sharing a friendly_name
    duplicate_targets: str = DUPLICATES_ERROR

    # Outcome synthesized for every rule of a target without results
    missing_outcome: Outcome = Outcome.ERROR

    def __post_init__(self) -> None:
        allowed = (DUPLICATES_ERROR, DUPLICATES_LAST_WINS)
        if self.duplicate_targets not in allowed:
            raise ValueError(
                f"duplicate_targets must be one of {allowed}, "
                f"got {self.duplicate_targets!r}"
            )
        if not isinstance(self.missing_outcome, Outcome):
            raise TypeError("missing_outcome must be an Outcome")


# Global default configuration instance
DEFAULT_CONFIG = AggregationConfig()

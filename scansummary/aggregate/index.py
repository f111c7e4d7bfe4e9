"""Target name -> position index used for rule-to-target links."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Sequence

from scansummary.config import DUPLICATES_LAST_WINS
from scansummary.exceptions import DuplicateTargetNameError
from scansummary.logging import get_logger

if TYPE_CHECKING:
    from scansummary.model.report import Target

logger = get_logger(__name__)


def build_target_index(
    targets: Sequence[Target], duplicates: str = "error"
) -> Dict[str, int]:
    """Map each target's ``friendly_name`` to its position.

    Args:
        targets: Targets in document order.
        duplicates: ``"error"`` to reject repeated names, ``"last_wins"`` to
            keep the later position.

    Raises:
        DuplicateTargetNameError: On a repeated name under the ``"error"`` policy.
    """
    index: Dict[str, int] = {}
    for position, target in enumerate(targets):
        name = target.friendly_name
        if name in index:
            if duplicates != DUPLICATES_LAST_WINS:
                raise DuplicateTargetNameError(name, index[name], position)
            logger.warning(
                "Duplicate target name '%s': position %d replaces %d in the index",
                name,
                position,
                index[name],
            )
        index[name] = position
    return index

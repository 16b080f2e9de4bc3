"""Error taxonomy for pool construction and draws.

Every failure the core can report derives from :class:`LotteryError`, so a
presentation layer can catch one base type and still branch on the concrete
class.  Nothing here is ever swallowed by the core; retry policy belongs to
the caller.
"""

from __future__ import annotations


class LotteryError(Exception):
    """Base class for all draft lottery failures."""


class ValidationError(LotteryError, ValueError):
    """Malformed entity list: empty, unequal weight vectors, duplicate ids, bad weights."""


class NotFoundError(LotteryError, KeyError):
    """Removal of an entity id that is not in the pool."""

    def __init__(self, entity_id: str) -> None:
        super().__init__(entity_id)
        self.entity_id = entity_id

    def __str__(self) -> str:
        return f"entity {self.entity_id!r} is not in the pool"


class EmptyPoolError(LotteryError):
    """Draw attempted with no remaining entities."""

    def __init__(self, pick_index: int) -> None:
        super().__init__(f"cannot draw pick {pick_index}: the pool is empty")
        self.pick_index = pick_index


class InvalidPickIndexError(LotteryError, IndexError):
    """Pick index outside the configured weight vectors."""

    def __init__(self, pick_index: int, total_picks: int) -> None:
        super().__init__(
            f"pick index {pick_index} out of range for {total_picks} configured picks"
        )
        self.pick_index = pick_index
        self.total_picks = total_picks


class DegenerateWeightsError(LotteryError):
    """Every remaining entity has zero weight for the requested pick."""

    def __init__(self, pick_index: int) -> None:
        super().__init__(
            f"all remaining weights are zero for pick {pick_index}; "
            "the caller must choose a fallback"
        )
        self.pick_index = pick_index

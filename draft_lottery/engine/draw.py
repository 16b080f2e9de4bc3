"""Draw engine — one weighted draw without replacement.

Uses cumulative-weight inversion: draw ``r`` uniformly from ``[0, total)``
and walk the pool in enumeration order subtracting each weight; the first
entity that drives ``r`` below zero wins.  The comparison is strict, so a
zero-weight entity can never win.

The engine holds no state.  Everything it needs arrives as arguments, and
the only side effect is consuming one value from the random source.
"""

from __future__ import annotations

import logging
import math

from draft_lottery.core.errors import (
    DegenerateWeightsError,
    EmptyPoolError,
    InvalidPickIndexError,
)
from draft_lottery.core.models import DrawResult, Entity
from draft_lottery.core.pool import EntityPool
from draft_lottery.systems.rng import RandomSource

logger = logging.getLogger(__name__)


def _check_pick(pool: EntityPool, pick_index: int) -> None:
    if len(pool) == 0:
        raise EmptyPoolError(pick_index)
    if not 0 <= pick_index < pool.total_picks:
        raise InvalidPickIndexError(pick_index, pool.total_picks)


def _unit(random_source: RandomSource) -> float:
    u = random_source()
    if not 0.0 <= u < 1.0:
        raise ValueError(f"random source returned {u!r}, expected a value in [0, 1)")
    return u


def _total_weight(weights: tuple[float, ...], pick_index: int) -> float:
    total = math.fsum(weights)
    if total <= 0:
        raise DegenerateWeightsError(pick_index)
    return total


def _select(pool: EntityPool, weights: tuple[float, ...], r: float) -> Entity:
    for entity, weight in zip(pool, weights):
        r -= weight
        if r < 0:
            return entity

    # Rounding left r >= 0 after the last entity; take the last one that could win.
    for entity, weight in zip(reversed(pool.entities), reversed(weights)):
        if weight > 0:
            logger.debug("Cumulative walk fell through; falling back to %s", entity.id)
            return entity
    raise AssertionError("positive total weight but no positive weight")


def draw(pool: EntityPool, pick_index: int, random_source: RandomSource) -> DrawResult:
    """Draw the winner of *pick_index* from *pool*.

    Raises EmptyPoolError, InvalidPickIndexError, or DegenerateWeightsError.
    """
    _check_pick(pool, pick_index)
    weights = pool.weights_at(pick_index)
    total = _total_weight(weights, pick_index)
    winner = _select(pool, weights, _unit(random_source) * total)
    return DrawResult(pick_index=pick_index, winner=winner, pool_after=pool.remove(winner.id))


def draw_uniform(pool: EntityPool, pick_index: int, random_source: RandomSource) -> DrawResult:
    """Equal-probability draw that ignores weights.

    Never used implicitly by :func:`draw`; a caller opts into it as its
    fallback for degenerate picks.
    """
    _check_pick(pool, pick_index)
    idx = min(int(_unit(random_source) * len(pool)), len(pool) - 1)
    winner = pool.entities[idx]
    return DrawResult(pick_index=pick_index, winner=winner, pool_after=pool.remove(winner.id))


def pick_odds(pool: EntityPool, pick_index: int) -> dict[str, float]:
    """Probability of each remaining entity winning *pick_index* right now."""
    _check_pick(pool, pick_index)
    weights = pool.weights_at(pick_index)
    total = _total_weight(weights, pick_index)
    return {entity.id: weight / total for entity, weight in zip(pool, weights)}

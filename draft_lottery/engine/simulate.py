"""Monte Carlo estimate of where each entity lands across many lotteries.

Every run is a full lottery driven through the same draw engine, each with
its own deterministic stream, so a (seed, runs) pair always produces the
same table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from draft_lottery.core.enums import DegeneratePolicy, Domain
from draft_lottery.core.errors import DegenerateWeightsError
from draft_lottery.core.pool import EntityPool
from draft_lottery.engine.draw import draw, draw_uniform
from draft_lottery.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PickDistribution:
    """How often each entity won each pick over ``runs`` lotteries."""

    runs: int
    entity_ids: tuple[str, ...]
    counts: Mapping[str, tuple[int, ...]]

    def probability(self, entity_id: str, pick_index: int) -> float:
        return self.counts[entity_id][pick_index] / self.runs

    def expected_pick(self, entity_id: str) -> float | None:
        """Mean 1-based pick among runs where the entity was drawn at all."""
        row = self.counts[entity_id]
        drawn = sum(row)
        if drawn == 0:
            return None
        return sum((i + 1) * c for i, c in enumerate(row)) / drawn


def simulate_lottery(
    pool: EntityPool,
    runs: int,
    rng: DeterministicRNG,
    *,
    degenerate_policy: DegeneratePolicy = DegeneratePolicy.RAISE,
) -> PickDistribution:
    """Run *runs* independent lotteries over *pool* and tally the picks."""
    if runs <= 0:
        raise ValueError(f"runs must be positive, got {runs}")

    picks = min(pool.total_picks, len(pool))
    counts = {eid: [0] * pool.total_picks for eid in pool.ids}

    for run in range(runs):
        source = rng.stream(Domain.SIMULATION, run)
        current = pool
        for pick_index in range(picks):
            try:
                result = draw(current, pick_index, source)
            except DegenerateWeightsError:
                if degenerate_policy != DegeneratePolicy.UNIFORM:
                    raise
                result = draw_uniform(current, pick_index, source)
            counts[result.winner_id][pick_index] += 1
            current = result.pool_after

    logger.info("Simulated %d lotteries over %d entities", runs, len(pool))
    return PickDistribution(
        runs=runs,
        entity_ids=pool.ids,
        counts={eid: tuple(row) for eid, row in counts.items()},
    )

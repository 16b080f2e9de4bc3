"""Tests for Monte Carlo pick-distribution estimates."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from draft_lottery.core.enums import DegeneratePolicy
from draft_lottery.core.errors import DegenerateWeightsError
from draft_lottery.core.pool import create_pool
from draft_lottery.core.teams import DEFAULT_TEAMS
from draft_lottery.engine.simulate import simulate_lottery
from draft_lottery.systems.rng import DeterministicRNG
from tests.helpers.sources import five_by_five, make_entity


class TestSimulation:

    def test_runs_must_be_positive(self):
        with pytest.raises(ValueError):
            simulate_lottery(create_pool(five_by_five()), 0, DeterministicRNG(1))

    def test_every_pick_filled_once_per_run(self):
        dist = simulate_lottery(create_pool(five_by_five()), 200, DeterministicRNG(1))
        for pick_index in range(5):
            assert sum(dist.counts[eid][pick_index] for eid in dist.entity_ids) == 200

    def test_every_entity_drawn_once_per_run(self):
        dist = simulate_lottery(create_pool(five_by_five()), 200, DeterministicRNG(1))
        for eid in dist.entity_ids:
            assert sum(dist.counts[eid]) == 200

    def test_deterministic_for_seed(self):
        pool = create_pool(five_by_five())
        a = simulate_lottery(pool, 100, DeterministicRNG(5))
        b = simulate_lottery(pool, 100, DeterministicRNG(5))
        assert a.counts == b.counts

    def test_zero_weight_never_wins_pick(self):
        pool = create_pool([make_entity("A", 0, 1), make_entity("B", 1, 1)])
        dist = simulate_lottery(pool, 100, DeterministicRNG(2))
        assert dist.counts["A"] == (0, 100)
        assert dist.counts["B"] == (100, 0)
        assert dist.expected_pick("A") == 2.0

    def test_expected_pick_none_when_never_drawn(self):
        pool = create_pool([make_entity("A", 1), make_entity("B", 0)])
        dist = simulate_lottery(pool, 50, DeterministicRNG(2))
        assert dist.expected_pick("A") == 1.0
        assert dist.expected_pick("B") is None

    def test_degenerate_raises_by_default(self):
        pool = create_pool([make_entity("A", 0), make_entity("B", 0)])
        with pytest.raises(DegenerateWeightsError):
            simulate_lottery(pool, 10, DeterministicRNG(2))

    def test_degenerate_uniform_policy(self):
        pool = create_pool([make_entity("A", 0), make_entity("B", 0)])
        dist = simulate_lottery(
            pool, 10, DeterministicRNG(2), degenerate_policy=DegeneratePolicy.UNIFORM,
        )
        assert dist.counts["A"][0] + dist.counts["B"][0] == 10

    @pytest.mark.slow
    def test_heavy_entity_dominates(self):
        pool = create_pool([make_entity("A", 999), make_entity("B", 1)])
        dist = simulate_lottery(pool, 5000, DeterministicRNG(9))
        assert dist.probability("A", 0) > 0.99

    @pytest.mark.slow
    def test_default_teams_first_pick_matches_weights(self):
        dist = simulate_lottery(create_pool(DEFAULT_TEAMS), 5000, DeterministicRNG(9))
        # Dragons hold 250 of 750 first-pick weight
        assert dist.probability("Dragons", 0) == pytest.approx(1 / 3, abs=0.03)
        assert dist.probability("Eagles", 0) == pytest.approx(50 / 750, abs=0.02)

"""Supporting systems: deterministic randomness."""

from draft_lottery.systems.rng import DeterministicRNG, RandomSource

__all__ = ["DeterministicRNG", "RandomSource"]

"""Domain-separated deterministic RNG using xxhash.

Formula: RNG_Value = Hash(Seed, Domain, Key, Counter)

Draws never touch a global generator; a driver hands the engine a random
source, and a seeded stream from here makes a whole lottery reproducible.
"""

from __future__ import annotations

import itertools
import struct
from typing import Callable

import xxhash

from draft_lottery.core.enums import Domain

# Zero-argument callable returning a float in [0.0, 1.0).
RandomSource = Callable[[], float]


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, counter), so two
    generators with the same seed always agree.
    """

    __slots__ = ("_seed",)

    _FLOAT_DENOM = float(1 << 53)

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, counter: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, counter)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, counter: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        # Top 53 bits only, so the quotient never rounds up to 1.0.
        return (self._hash(domain, key, counter) >> 11) / self._FLOAT_DENOM

    def stream(self, domain: Domain, key: int = 0) -> RandomSource:
        """Return a random source yielding successive counters for (domain, key)."""
        counter = itertools.count()

        def _next() -> float:
            return self.next_float(domain, key, next(counter))

        return _next

"""Lottery configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from draft_lottery.core.enums import DegeneratePolicy


@dataclass(frozen=True)
class LotteryConfig:
    """Immutable configuration for one lottery session."""

    # Randomness
    seed: int = 42

    # Pacing (seconds); zero disables the wait
    draw_delay_seconds: float = 2.0    # Machine swirl before each ball pops
    reveal_seconds: float = 4.0        # How long a drawn result stays on screen

    # Fallback when every remaining weight for a pick is zero: "raise" or "uniform"
    degenerate_policy: str = "raise"

    # Monte Carlo
    simulation_runs: int = 10000

    # Logging
    log_level: str = "INFO"

    @property
    def policy(self) -> DegeneratePolicy:
        return DegeneratePolicy[self.degenerate_policy.upper()]

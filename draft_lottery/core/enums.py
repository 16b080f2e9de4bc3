"""Enumerations used throughout the lottery."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Phase(IntEnum):
    """Lifecycle phases of a lottery sequencer."""

    IDLE = 0
    RUNNING = 1
    DRAWING = 2
    REVEALING = 3
    COMPLETE = 4


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    DRAW = 0
    SIMULATION = 1


@unique
class DegeneratePolicy(IntEnum):
    """What a sequencer does when every remaining weight for a pick is zero."""

    RAISE = 0      # Surface DegenerateWeightsError to the driver
    UNIFORM = 1    # Fall back to an equal-probability draw

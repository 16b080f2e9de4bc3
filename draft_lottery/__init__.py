"""Weighted draft lottery: pick-dependent weighted draws without replacement."""

from draft_lottery.core import (
    DegeneratePolicy,
    DegenerateWeightsError,
    DrawResult,
    EmptyPoolError,
    Entity,
    EntityPool,
    InvalidPickIndexError,
    LotteryError,
    NotFoundError,
    Phase,
    ValidationError,
    create_pool,
    remove,
    size,
)
from draft_lottery.engine import LotterySequencer, TimedDriver, draw, simulate_lottery

__version__ = "0.1.0"

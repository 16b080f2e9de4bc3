"""Engine layer: draw algorithm, lottery sequencer, timed driver, simulation."""

from draft_lottery.engine.draw import draw, draw_uniform, pick_odds
from draft_lottery.engine.driver import TimedDriver
from draft_lottery.engine.sequencer import LotterySequencer, SequencerSnapshot
from draft_lottery.engine.simulate import PickDistribution, simulate_lottery

__all__ = [
    "LotterySequencer",
    "PickDistribution",
    "SequencerSnapshot",
    "TimedDriver",
    "draw",
    "draw_uniform",
    "pick_odds",
    "simulate_lottery",
]

"""TimedDriver — advances a sequencer on wall-clock delays.

Reproduces the pacing of a televised lottery: the machine swirls for
``draw_delay`` seconds before each ball pops, and every result stays on
screen for ``reveal_seconds``.  ``sleep`` is injectable so tests and the
``--fast`` CLI mode run without waiting.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

from draft_lottery.core.enums import Phase

if TYPE_CHECKING:
    from draft_lottery.config import LotteryConfig
    from draft_lottery.engine.sequencer import LotterySequencer, SequencerSnapshot

logger = logging.getLogger(__name__)


class TimedDriver:
    """Runs a sequencer from start to COMPLETE, one draw at a time."""

    __slots__ = ("_sequencer", "_draw_delay", "_reveal_seconds", "_sleep")

    def __init__(
        self,
        sequencer: LotterySequencer,
        *,
        draw_delay: float = 2.0,
        reveal_seconds: float = 4.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._sequencer = sequencer
        self._draw_delay = max(0.0, draw_delay)
        self._reveal_seconds = max(0.0, reveal_seconds)
        self._sleep = sleep

    @classmethod
    def from_config(
        cls,
        sequencer: LotterySequencer,
        config: LotteryConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> TimedDriver:
        return cls(
            sequencer,
            draw_delay=config.draw_delay_seconds,
            reveal_seconds=config.reveal_seconds,
            sleep=sleep,
        )

    def _wait(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)

    def run(self) -> SequencerSnapshot:
        """Start the lottery and drive it until it completes or is reset."""
        seq = self._sequencer
        seq.start()
        while seq.phase == Phase.RUNNING:
            self._wait(self._draw_delay)
            if seq.draw_next() is None:
                # Left RUNNING during the swirl (reset by a listener).
                break
            self._wait(self._reveal_seconds)
            seq.finish_reveal()

        snap = seq.snapshot()
        if not snap.finished:
            logger.info("Driver stopped in phase %s", snap.phase.name)
        return snap

"""LotterySequencer — the phase state machine that turns draws into a lottery.

    IDLE --start()--> RUNNING --draw_next()--> REVEALING --finish_reveal()--> RUNNING | COMPLETE
                                   (DRAWING while the engine runs)
    any phase --reset()--> IDLE

The sequencer owns pool, pick index, and results on behalf of the driver.
It decides nothing about *when* to draw: a timer, UI event, or test calls
``draw_next`` and ``finish_reveal``.  Requests that do not fit the current
phase are ignored, which keeps at most one draw outstanding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from draft_lottery.core.enums import DegeneratePolicy, Phase
from draft_lottery.core.errors import DegenerateWeightsError
from draft_lottery.core.models import DrawResult
from draft_lottery.core.pool import EntityPool
from draft_lottery.engine.draw import draw, draw_uniform
from draft_lottery.systems.rng import RandomSource
from draft_lottery.utils.event_log import EventLog, LotteryEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SequencerSnapshot:
    """Read-only view of the sequencer after a transition."""

    phase: Phase
    pick_index: int
    total_picks: int
    results: tuple[DrawResult, ...]
    current_draw_result: DrawResult | None
    remaining: EntityPool

    @property
    def finished(self) -> bool:
        return self.phase == Phase.COMPLETE

    @property
    def winner_ids(self) -> tuple[str, ...]:
        return tuple(r.winner_id for r in self.results)


Listener = Callable[[SequencerSnapshot], None]


class LotterySequencer:
    """Drives one lottery from an initial pool to a final results list."""

    def __init__(
        self,
        initial_pool: EntityPool,
        random_source: RandomSource,
        *,
        degenerate_policy: DegeneratePolicy = DegeneratePolicy.RAISE,
        event_log: EventLog | None = None,
    ) -> None:
        self._initial_pool = initial_pool
        self._random_source = random_source
        self._degenerate_policy = degenerate_policy
        self._event_log = event_log if event_log is not None else EventLog()
        self._listeners: list[Listener] = []
        self._clear()

    def _clear(self) -> None:
        self._phase = Phase.IDLE
        self._pool = self._initial_pool
        self._pick_index = 0
        self._results: list[DrawResult] = []
        self._current: DrawResult | None = None

    # -- observation --

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def total_picks(self) -> int:
        return self._initial_pool.total_picks

    def snapshot(self) -> SequencerSnapshot:
        return SequencerSnapshot(
            phase=self._phase,
            pick_index=self._pick_index,
            total_picks=self.total_picks,
            results=tuple(self._results),
            current_draw_result=self._current,
            remaining=self._pool,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every transition; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self, category: str, message: str, entity_ids: tuple[str, ...] = ()) -> None:
        self._event_log.append(LotteryEvent(self._pick_index, category, message, entity_ids))
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # -- actions --

    def start(self) -> None:
        if self._phase != Phase.IDLE:
            logger.debug("start() ignored in phase %s", self._phase.name)
            return
        if len(self._pool) == 0:
            self._phase = Phase.COMPLETE
            logger.info("Lottery started with an empty pool; nothing to draw")
            self._publish("complete", "Nothing to draw")
            return
        self._phase = Phase.RUNNING
        logger.info(
            "Lottery started: %d entities, %d picks", len(self._pool), self.total_picks,
        )
        self._publish("start", f"Lottery started with {len(self._pool)} entities")

    def draw_next(self) -> DrawResult | None:
        """Draw the current pick.  Returns None if the phase does not allow a draw."""
        if self._phase != Phase.RUNNING:
            logger.debug("draw_next() ignored in phase %s", self._phase.name)
            return None

        # DRAWING is not published; the engine call is synchronous.
        self._phase = Phase.DRAWING
        try:
            result = self._draw_once()
        except Exception:
            self._phase = Phase.RUNNING
            raise

        self._pool = result.pool_after
        self._results.append(result)
        self._current = result
        self._phase = Phase.REVEALING
        logger.info("Pick %d: %s", result.pick_number, result.winner_id)
        self._publish("draw", f"Pick {result.pick_number}: {result.winner.name}", (result.winner_id,))
        return result

    def _draw_once(self) -> DrawResult:
        try:
            return draw(self._pool, self._pick_index, self._random_source)
        except DegenerateWeightsError:
            if self._degenerate_policy != DegeneratePolicy.UNIFORM:
                raise
            logger.warning(
                "All weights zero for pick %d; drawing uniformly", self._pick_index + 1,
            )
            return draw_uniform(self._pool, self._pick_index, self._random_source)

    def finish_reveal(self) -> None:
        """End the reveal of the pending result and advance the pick."""
        if self._phase != Phase.REVEALING:
            logger.debug("finish_reveal() ignored in phase %s", self._phase.name)
            return

        self._current = None
        self._pick_index += 1
        if self._pick_index >= self.total_picks or len(self._pool) == 0:
            self._phase = Phase.COMPLETE
            logger.info("Lottery complete: %s", ", ".join(r.winner_id for r in self._results))
            self._publish("complete", f"Lottery complete after {len(self._results)} picks")
            return

        self._phase = Phase.RUNNING
        self._publish("reveal", f"Ready for pick {self._pick_index + 1}")

    def reset(self) -> None:
        """Return to IDLE from any phase, discarding the pending draw and results."""
        self._clear()
        self._event_log.clear()
        logger.info("Lottery reset")
        self._publish("reset", "Lottery reset")

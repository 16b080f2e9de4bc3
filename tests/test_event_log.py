"""Tests for the lottery event feed."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from draft_lottery.utils.event_log import EventLog, LotteryEvent


def _log_with(count: int) -> EventLog:
    log = EventLog()
    for i in range(count):
        log.append(LotteryEvent(pick_index=i, category="draw", message=f"Pick {i + 1}"))
    return log


class TestEventLog:

    def test_latest_returns_most_recent(self):
        log = _log_with(3)
        assert [e.pick_index for e in log.latest(2)] == [1, 2]
        assert len(log.latest()) == 3

    def test_latest_zero_or_negative_is_empty(self):
        log = _log_with(3)
        assert log.latest(0) == []
        assert log.latest(-1) == []

    def test_since_pick(self):
        log = _log_with(4)
        assert [e.pick_index for e in log.since_pick(2)] == [2, 3]

    def test_clear(self):
        log = _log_with(3)
        log.clear()
        assert len(log) == 0
        assert log.latest() == []

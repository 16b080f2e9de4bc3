"""Thread-safe event feed of lottery transitions for presentation layers."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LotteryEvent:
    """A single lottery event for the event feed."""

    pick_index: int
    category: str          # start / draw / reveal / complete / reset
    message: str
    entity_ids: tuple[str, ...] = ()


class EventLog:
    """Unbounded event log. Writers append; readers snapshot a slice.

    All events are kept until cleared via ``clear()``.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self) -> None:
        self._buffer: deque[LotteryEvent] = deque()
        self._lock = threading.Lock()

    def append(self, event: LotteryEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_pick(self, pick_index: int) -> list[LotteryEvent]:
        """Return all events with pick_index >= *pick_index*."""
        with self._lock:
            return [e for e in self._buffer if e.pick_index >= pick_index]

    def latest(self, count: int = 50) -> list[LotteryEvent]:
        """Return the *count* most recent events."""
        if count <= 0:
            return []
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

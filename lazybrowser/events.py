"""Background producer that turns terminal input and a timer into events.

A single daemon thread polls stdin with a tick-sized timeout. Keys become
``Key`` events, timeouts become ``Tick`` events, and both land in one
unbounded FIFO queue that the main loop drains one event at a time.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Queue

from .input import read_key

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_MS = 200


@dataclass(frozen=True)
class Tick:
    """Timer event; a redraw cue with no payload."""


@dataclass(frozen=True)
class Key:
    """One decoded key token."""

    code: str


Event = Tick | Key


class EventSource:
    """Single-producer event thread feeding an unbounded queue.

    Events are never dropped or coalesced. When reading input fails, no event
    is produced for that cycle and the thread waits one tick before polling
    again, so the consumer only sees a longer gap between events.
    """

    def __init__(
        self,
        stdin_fd: int,
        tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        read_key: Callable[[int, int | None], str] = read_key,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.tick_interval_ms = max(1, int(tick_interval_ms))
        self._read_key = read_key
        self._events: Queue[Event] = Queue()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the polling thread; calling twice is a no-op."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._run,
            name="lazybrowser-event-source",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Ask the thread to exit after its current poll."""
        self._stopped.set()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        while not self._stopped.is_set():
            try:
                key = self._read_key(self.stdin_fd, self.tick_interval_ms)
            except (OSError, EOFError) as exc:
                logger.debug("input read failed, skipping event: %s", exc)
                self._stopped.wait(self.tick_interval_ms / 1000.0)
                continue
            self._events.put(Key(key) if key else Tick())

    def next_event(self, timeout: float | None = None) -> Event | None:
        """Block until the next event; ``None`` only when ``timeout`` elapses."""
        try:
            return self._events.get(timeout=timeout)
        except Empty:
            return None


__all__ = [
    "DEFAULT_TICK_INTERVAL_MS",
    "Tick",
    "Key",
    "Event",
    "EventSource",
]

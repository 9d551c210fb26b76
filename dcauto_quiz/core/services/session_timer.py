"""Countdown state and the tickers that drive it."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Event, Thread
from typing import Callable, Protocol

from dcauto_quiz.constants.quiz_constants import TICK_INTERVAL_SECONDS, TIMER_START_SECONDS

TickCallback = Callable[[], None]


class Ticker(Protocol):
    """Periodic callback source. ``stop`` must be safe to call at any time."""

    def start(self, callback: TickCallback) -> None: ...

    def stop(self) -> None: ...

    def is_running(self) -> bool: ...


@dataclass(slots=True)
class Countdown:
    """Whole-second countdown that only moves while running."""

    budget_seconds: int = TIMER_START_SECONDS
    remaining_seconds: int = TIMER_START_SECONDS
    running: bool = False

    def reset(self) -> None:
        self.remaining_seconds = self.budget_seconds
        self.running = False

    def decrement(self) -> bool:
        """Consume one second. Returns True once the countdown has reached zero."""
        if self.running and self.remaining_seconds > 0:
            self.remaining_seconds -= 1
        return self.remaining_seconds <= 0


class ManualTicker:
    """Ticker driven explicitly by the caller; used by tests and scripted runs."""

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self.start_count: int = 0
        self.stop_count: int = 0

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self.start_count += 1

    def stop(self) -> None:
        self._callback = None
        self.stop_count += 1

    def is_running(self) -> bool:
        return self._callback is not None

    @property
    def callback(self) -> TickCallback | None:
        return self._callback

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self._callback is None:
                return
            self._callback()


class ThreadingTicker:
    """Calls the callback once per interval from a daemon thread."""

    def __init__(self, interval_seconds: float = TICK_INTERVAL_SECONDS) -> None:
        self._interval = interval_seconds
        self._thread: Thread | None = None
        self._stop_event: Event | None = None

    def start(self, callback: TickCallback) -> None:
        self.stop()
        stop_event = Event()

        def run() -> None:
            while not stop_event.wait(self._interval):
                callback()

        self._stop_event = stop_event
        self._thread = Thread(target=run, name="QuizTicker", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        # No join: the tick thread may be waiting on the caller's lock.
        if self._stop_event is not None:
            self._stop_event.set()
        self._thread = None
        self._stop_event = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

"""Periodic invocation of a handler on a background thread."""

from __future__ import annotations

import logging
import threading
import time
from datetime import timedelta
from typing import Callable, Optional

_log = logging.getLogger(__name__)


class Ticker:
    """Calls ``handler`` every ``period`` with the real time elapsed since the last call.

    Exceptions raised by the handler are swallowed so that ticking goes on.
    """

    def __init__(self, period: timedelta, handler: Callable[[timedelta], None]) -> None:
        if period <= timedelta(0):
            raise ValueError("tick period must be positive")
        self._period = period
        self._handler = handler
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def period(self) -> timedelta:
        return self._period

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Begin ticking; a ticker may be started only once."""
        if self._thread is not None:
            raise RuntimeError("ticker has already been started")
        self._thread = threading.Thread(target=self._run, name="ticker", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop ticking and wait for the worker thread to finish."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def __enter__(self) -> Ticker:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        interval = self._period.total_seconds()
        last_tick = time.monotonic()
        while not self._stop_event.wait(interval):
            this_tick = time.monotonic()
            delta = timedelta(milliseconds=int((this_tick - last_tick) * 1000))
            last_tick = this_tick
            try:
                self._handler(delta)
            except Exception:
                _log.debug("tick handler failed", exc_info=True)
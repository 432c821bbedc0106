"""Cancellable recurring tick sources for the session timer."""

from __future__ import annotations

import threading
from typing import Callable, List, Optional, Protocol

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

TickCallback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Protocol implemented by every tick source."""

    def call_every(self, interval: float, callback: TickCallback) -> TimerHandle:
        ...


class _ManualHandle:
    def __init__(self, scheduler: "ManualScheduler", interval: float, callback: TickCallback) -> None:
        self._scheduler = scheduler
        self.interval = interval
        self.callback = callback
        self.cancelled = False
        self._pending = 0.0

    def cancel(self) -> None:
        self.cancelled = True
        self._scheduler._discard(self)

    def _advance(self, seconds: float) -> None:
        self._pending += seconds
        while not self.cancelled and self._pending >= self.interval:
            self._pending -= self.interval
            self.callback()


class ManualScheduler:
    """Scheduler driven explicitly by the host (or by tests) via :meth:`advance`."""

    def __init__(self) -> None:
        self._handles: List[_ManualHandle] = []

    def call_every(self, interval: float, callback: TickCallback) -> _ManualHandle:
        handle = _ManualHandle(self, interval, callback)
        self._handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        for handle in list(self._handles):
            handle._advance(seconds)

    @property
    def active_count(self) -> int:
        return len(self._handles)

    def _discard(self, handle: _ManualHandle) -> None:
        if handle in self._handles:
            self._handles.remove(handle)


class _ThreadingHandle:
    def __init__(self, interval: float, callback: TickCallback) -> None:
        self.interval = interval
        self.callback = callback
        self._lock = threading.Lock()
        self._cancelled = False
        self._timer: Optional[threading.Timer] = None
        self._schedule()

    def _schedule(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._timer = threading.Timer(self.interval, self._run)
            self._timer.daemon = True
            self._timer.start()

    def _run(self) -> None:
        with self._lock:
            if self._cancelled:
                return
        try:
            self.callback()
        finally:
            self._schedule()

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()


class ThreadingScheduler:
    """Wall-clock scheduler backed by ``threading.Timer``."""

    def call_every(self, interval: float, callback: TickCallback) -> _ThreadingHandle:
        LOGGER.debug("Starting %ss recurring timer", interval)
        return _ThreadingHandle(interval, callback)

"""
Frame schedulers for zoom/pan animation.

An animation asks for one frame at a time and must be able to cancel the
pending frame. Schedulers hide where frames come from: a deterministic
manual clock (tests, headless hosts) or an asyncio event loop.
"""

import asyncio
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

# Frame callbacks receive the frame timestamp in milliseconds
FrameCallback = Callable[[float], None]

DEFAULT_FRAME_INTERVAL_MS = 16.0


class FrameScheduler(ABC):
    """Schedules single animation frames."""

    @abstractmethod
    def now(self) -> float:
        """Current time in milliseconds, on the same clock as frame timestamps."""

    @abstractmethod
    def request(self, callback: FrameCallback) -> Any:
        """Run callback on the next frame. Returns a handle for cancel()."""

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Drop a pending frame. Unknown or already-run handles are ignored."""


class ManualFrameScheduler(FrameScheduler):
    """
    Frames run only when tick() is called.

    Callbacks requested while a tick is running go to the next tick.
    """

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = start_ms
        self._pending: Dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def now(self) -> float:
        return self.now_ms

    def request(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: Any) -> None:
        self._pending.pop(handle, None)

    def tick(self, step_ms: float = DEFAULT_FRAME_INTERVAL_MS) -> int:
        """
        Advance the clock by step_ms and run the frames that were pending.

        Returns:
            Number of callbacks run
        """
        self.now_ms += step_ms
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback(self.now_ms)
        return len(due)

    def run_until_idle(
        self,
        step_ms: float = DEFAULT_FRAME_INTERVAL_MS,
        max_frames: int = 1000
    ) -> int:
        """Tick until nothing is pending. Returns the number of ticks."""
        ticks = 0
        while self._pending and ticks < max_frames:
            self.tick(step_ms)
            ticks += 1
        return ticks


class AsyncioFrameScheduler(FrameScheduler):
    """Frames driven by an asyncio event loop at a fixed interval."""

    def __init__(
        self,
        interval_ms: float = DEFAULT_FRAME_INTERVAL_MS,
        loop: Optional[asyncio.AbstractEventLoop] = None
    ):
        self.interval_ms = interval_ms
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time() * 1000

    def request(self, callback: FrameCallback) -> asyncio.TimerHandle:
        return self.loop.call_later(
            self.interval_ms / 1000,
            lambda: callback(self.now()),
        )

    def cancel(self, handle: Any) -> None:
        if handle is not None:
            handle.cancel()

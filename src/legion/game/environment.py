"""Environment: synchronous frame scheduler a Game loops on.

Usage:
    env = Environment()
    env.request_frame(lambda: print("frame"))
    env.run()
"""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from typing import Any

from legion.config import get_settings
from legion.core.klass import Class


class _EnvironmentMembers:
    class_name = "Environment"

    frame_interval: float
    """Seconds between frames; from settings unless given."""

    def _prepare(self) -> None:
        self._frames: deque[Callable[[], Any]] = deque()
        self.frame_interval = get_settings().frame_interval

    def request_frame(self, callback: Callable[[], Any]) -> None:
        """Queue ``callback`` to run on the next frame."""
        self._frames.append(callback)

    def pending(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._frames)

    def now(self) -> float:
        """Monotonic clock in seconds."""
        return time.monotonic()

    def run(self, max_frames: int | None = None) -> int:
        """Run frames until nothing is queued or ``max_frames`` have run.

        Callbacks requested while a frame runs are deferred to the next one.

        Args:
            max_frames: Upper bound on frames to run. None runs until idle.

        Returns:
            Number of frames run.
        """
        ran = 0
        while self._frames and (max_frames is None or ran < max_frames):
            callbacks = list(self._frames)
            self._frames.clear()
            for callback in callbacks:
                callback()
            ran += 1
        return ran


Environment = Class.implement(_EnvironmentMembers)

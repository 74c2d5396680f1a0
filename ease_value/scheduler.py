"""Frame scheduler: an animation-frame callback queue and its driver loop."""
from __future__ import annotations

import itertools
import logging
import time
from typing import Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


@runtime_checkable
class FrameScheduler(Protocol):
    """Runs callbacks on the next frame.

    ``schedule`` returns a token that ``cancel`` accepts. Canceling an
    unknown or already-run token is a no-op.
    """

    def schedule(self, callback: FrameCallback) -> int:
        ...

    def cancel(self, token: int) -> None:
        ...


class FrameLoop:
    """Per-frame callback queue.

    Callbacks scheduled while a frame runs are deferred to the next frame,
    so a callback that reschedules itself runs once per ``tick``.
    """

    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._interval = 1.0 / fps
        self._tokens = itertools.count(1)
        self._pending: dict[int, FrameCallback] = {}
        self._current: dict[int, FrameCallback] = {}
        self._frame_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def pending(self) -> int:
        return len(self._pending) + len(self._current)

    def schedule(self, callback: FrameCallback) -> int:
        token = next(self._tokens)
        self._pending[token] = callback
        return token

    def cancel(self, token: int) -> None:
        if self._pending.pop(token, None) is None:
            self._current.pop(token, None)

    def tick(self) -> int:
        """Run one frame. Returns the number of callbacks invoked."""
        self._frame_number += 1
        self._current, self._pending = self._pending, {}
        count = 0
        try:
            while self._current:
                token = next(iter(self._current))
                callback = self._current.pop(token)
                count += 1
                callback()
        except Exception:
            logger.debug(
                f"Frame {self._frame_number} aborted, "
                f"{len(self._current)} callbacks requeued"
            )
            raise
        finally:
            if self._current:
                self._pending = {**self._current, **self._pending}
                self._current = {}
        return count

    def run(self, n: int) -> None:
        for _ in range(n):
            self.tick()

    def run_until_idle(self, max_frames: int | None = None, paced: bool = True) -> int:
        """Tick until nothing is scheduled. Returns the number of frames run.

        When ``paced`` the loop sleeps out the rest of each frame interval.
        """
        frames = 0
        while self.pending:
            if max_frames is not None and frames >= max_frames:
                break
            start = time.monotonic()
            self.tick()
            frames += 1
            if paced:
                sleep_time = self._interval - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        return frames


_default_loop: FrameLoop | None = None


def get_default_loop() -> FrameLoop:
    """Process-wide loop used when no scheduler is injected."""
    global _default_loop
    if _default_loop is None:
        _default_loop = FrameLoop()
    return _default_loop

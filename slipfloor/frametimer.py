"""Frame pacing and frame-rate measurement."""

from __future__ import annotations

import time
from collections.abc import Callable

ONE_SECOND = 1_000_000
MAX_DELTA_TIME_FACTOR = 5
DEFAULT_REFRESH_RATE = 60


def _microseconds() -> int:
    return time.perf_counter_ns() // 1000


class FrameTimer:
    """Decides which frames update the game and measures the frame rate.

    With ``fps`` given the update rate is fixed to at most that many frames a
    second (capped by ``refresh_rate``); without it every frame updates.
    Times are read from ``clock`` in microseconds.
    """

    def __init__(
        self,
        fps: int | None = None,
        *,
        refresh_rate: int = DEFAULT_REFRESH_RATE,
        clock: Callable[[], int] = _microseconds,
    ) -> None:
        if refresh_rate <= 0:
            raise ValueError("refresh rate must be positive")
        if fps is not None and fps <= 0:
            raise ValueError("fps must be positive")
        self._clock = clock
        self._is_fixed_fps = fps is not None
        rate = refresh_rate if fps is None else min(fps, refresh_rate)
        self._target_elapsed_time = ONE_SECOND // rate
        self.reset()

    def reset(self) -> None:
        """Discard all measurements and start again from now."""
        self._last_time = self._clock()
        self._accumulated_time = 0
        self._start_time = self._last_time
        self._elapsed_time = ONE_SECOND
        self._frame_count = 0
        self._frame_rate = 0
        self._is_update_frame = False

    def update(self) -> None:
        """Advance the timer by the time passed since the last call."""
        current_time = self._clock()
        delta_time = current_time - self._last_time

        if delta_time > self._target_elapsed_time * MAX_DELTA_TIME_FACTOR:
            delta_time = self._target_elapsed_time

        if self._is_fixed_fps:
            self._accumulated_time += delta_time
            self._is_update_frame = self._accumulated_time >= self._target_elapsed_time
            if self._is_update_frame:
                self._frame_count += 1
                self._elapsed_time = self._target_elapsed_time
                self._accumulated_time -= self._target_elapsed_time
        else:
            self._is_update_frame = True
            self._frame_count += 1
            self._elapsed_time = delta_time

        if current_time - self._start_time >= ONE_SECOND:
            self._frame_rate = self._frame_count
            self._frame_count = 0
            self._start_time = current_time

        self._last_time = current_time

    @property
    def is_update_frame(self) -> bool:
        """Whether the game should be updated this frame."""
        return self._is_update_frame

    @property
    def elapsed_time(self) -> float:
        """Seconds covered by the last updating frame."""
        return self._elapsed_time / ONE_SECOND

    @property
    def frame_rate(self) -> int:
        """Updating frames counted over the last full second."""
        return self._frame_rate
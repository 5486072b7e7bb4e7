"""Frame timing: variable delta time, fixed-rate ticks and an optional FPS cap."""

from __future__ import annotations

MAX_DELTA_TIME = 0.5


class GameClock:
    """Tracks frame and fixed-update timing from times passed in by the caller."""

    def __init__(self, fixed_update_rate: float = 60.0, limit_fps: float = 0.0) -> None:
        if fixed_update_rate <= 0:
            raise ValueError("fixed update rate must be positive")
        if limit_fps < 0:
            raise ValueError("FPS limit cannot be negative")
        self.fixed_update_rate = fixed_update_rate
        self.limit_fps = limit_fps
        self._delta_time = 0.0
        self._prev_update = 0.0
        self._prev_fixed_update = 0.0
        self._freeze = False
        self._is_fixed_update = False

    def start(self, current_time: float) -> None:
        """Begin timing at ``current_time``."""
        self._prev_update = current_time
        self._prev_fixed_update = current_time
        self._delta_time = 0.0
        self._is_fixed_update = False

    def advance(self, current_time: float) -> bool:
        """Step to ``current_time``; return False if the FPS cap skips the frame.

        Delta time is capped at half a second, and is zero once after a freeze.
        """
        elapsed = current_time - self._prev_update
        if self.limit_fps > 0 and elapsed < 1.0 / self.limit_fps:
            return False
        self._delta_time = min(elapsed, MAX_DELTA_TIME)
        if self._freeze:
            self._delta_time = 0.0
            self._freeze = False
        self._prev_update = current_time
        self._is_fixed_update = (
            current_time - self._prev_fixed_update > self.fixed_delta_time()
        )
        if self._is_fixed_update:
            self._prev_fixed_update = current_time
        return True

    def delta_time(self) -> float:
        return self._delta_time

    def fixed_delta_time(self) -> float:
        return 1.0 / self.fixed_update_rate

    def freeze_delta_time(self) -> None:
        """Make the next frame's delta time zero."""
        self._freeze = True

    def is_fixed_update(self) -> bool:
        return self._is_fixed_update
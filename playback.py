"""Step/play/pause state for replaying precomputed frames."""

from __future__ import annotations

from models import PlaybackOptions


class Playback:
    """
    Track which frame is shown.

    Playback only selects an index into an immutable frame sequence; it never
    touches frame contents. A host drives ``tick()`` from its own timer.
    """

    def __init__(self, frame_count: int = 0, options: PlaybackOptions | None = None) -> None:
        self.options = options or PlaybackOptions()
        self.frame_count = max(0, frame_count)
        self.step = 0
        self.is_playing = False
        self.speed_ms = self.options.speed_ms
        self.set_speed(self.options.speed_ms)

    def load(self, frame_count: int) -> None:
        """Reset for a freshly computed frame sequence."""
        self.frame_count = max(0, frame_count)
        self.reset()

    @property
    def last_step(self) -> int:
        return max(0, self.frame_count - 1)

    @property
    def at_end(self) -> bool:
        return self.step >= self.last_step

    @property
    def can_step_back(self) -> bool:
        return self.frame_count > 0 and self.step > 0

    @property
    def can_step_forward(self) -> bool:
        return self.frame_count > 0 and not self.at_end

    def play(self) -> None:
        if self.frame_count == 0 or self.at_end:
            self.is_playing = False
            return
        self.is_playing = True

    def pause(self) -> None:
        self.is_playing = False

    def toggle(self) -> bool:
        if self.is_playing:
            self.pause()
        else:
            self.play()
        return self.is_playing

    def step_forward(self) -> None:
        self.jump(self.step + 1)

    def step_back(self) -> None:
        self.jump(self.step - 1)

    def reset(self) -> None:
        self.is_playing = False
        self.step = 0

    def jump(self, index: int) -> None:
        self.step = min(max(0, index), self.last_step)

    def set_speed(self, speed_ms: float) -> int:
        """Clamp to the allowed range and snap to the speed step."""
        opts = self.options
        snapped = round(speed_ms / opts.speed_step_ms) * opts.speed_step_ms
        self.speed_ms = int(min(max(snapped, opts.min_speed_ms), opts.max_speed_ms))
        return self.speed_ms

    def tick(self) -> bool:
        """Advance one step while playing; pauses once the last frame is shown."""
        if not self.is_playing:
            return False
        if self.at_end:
            self.is_playing = False
            return False
        self.step += 1
        if self.at_end:
            self.is_playing = False
        return True

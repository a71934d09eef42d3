"""
Scrubbing over a finished step sequence.

Playback only ever moves an index; the sequence itself is never touched,
so pausing, rewinding or jumping is always safe.
"""

from dataclasses import dataclass

# "tick" is the autoplay timer; the rest are manual controls
DIRECTIONS = ("tick", "next", "prev", "first", "last", "toggle_auto")


@dataclass
class Playback:
    total: int
    index: int = 0
    autoplay: bool = False
    speed: float = 0.25  # seconds per step

    def __post_init__(self):
        self.index = self._clamp(self.index)

    def _clamp(self, idx: int) -> int:
        return max(0, min(idx, self.total - 1))

    @property
    def at_end(self) -> bool:
        return self.index >= self.total - 1

    def tick(self):
        """Advance one frame while playing; a stale tick after pause does nothing."""
        if not self.autoplay:
            return
        self.index = self._clamp(self.index + 1)
        if self.at_end:
            self.autoplay = False

    def step_forward(self):
        self.pause()
        self.index = self._clamp(self.index + 1)

    def step_backward(self):
        self.pause()
        self.index = self._clamp(self.index - 1)

    def skip_to_start(self):
        self.pause()
        self.index = 0

    def skip_to_end(self):
        self.pause()
        self.index = self._clamp(self.total - 1)

    def play(self):
        if self.at_end:
            self.index = 0
        self.autoplay = self.total > 1

    def pause(self):
        self.autoplay = False

    def toggle(self):
        if self.autoplay:
            self.pause()
        else:
            self.play()

    def apply(self, direction: str) -> None:
        """Apply one of DIRECTIONS; unknown words are ignored."""
        if direction == "tick":
            self.tick()
        elif direction == "next":
            self.step_forward()
        elif direction == "prev":
            self.step_backward()
        elif direction == "first":
            self.skip_to_start()
        elif direction == "last":
            self.skip_to_end()
        elif direction == "toggle_auto":
            self.toggle()

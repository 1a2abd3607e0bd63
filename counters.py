import math
from typing import Callable, Optional

from scheduling import CooperativeLoop, FrameHandle

COUNTER_DURATION_MS = 900


def ease_out_cubic(p: float) -> float:
    return 1 - (1 - p) ** 3


class AnimatedCounter:
    """Counts a displayed integer up from 0 to `target`, one step per frame."""

    def __init__(self, target: int, loop: CooperativeLoop, duration: float = COUNTER_DURATION_MS,
                 suffix: str = "", on_change: Optional[Callable[[int], None]] = None):
        if duration <= 0:
            raise ValueError("duration must be > 0")
        self.target = int(target)
        self.duration = duration
        self.suffix = suffix
        self.value = 0
        self._loop = loop
        self._on_change = on_change
        self._start_time = loop.now()
        self._frame: Optional[FrameHandle] = None
        self.done = False

    @property
    def display(self) -> str:
        return f"{self.value}{self.suffix}"

    @property
    def running(self) -> bool:
        return self._frame is not None

    def start(self) -> None:
        self.dispose()
        self.value = 0
        self.done = False
        self._start_time = self._loop.now()
        self._frame = self._loop.request_frame(self._tick)

    def set_target(self, target: int) -> None:
        if int(target) == self.target:
            return
        self.target = int(target)
        self.start()

    def dispose(self) -> None:
        if self._frame is not None:
            self._frame.cancel()
            self._frame = None

    def value_at(self, elapsed: float) -> int:
        p = min(1.0, max(0.0, elapsed / self.duration))
        # half-up, the same way the browser rounds
        return math.floor(self.target * ease_out_cubic(p) + 0.5)

    def _tick(self, now: float) -> None:
        elapsed = now - self._start_time
        self.value = self.value_at(elapsed)
        if self._on_change:
            self._on_change(self.value)
        if elapsed < self.duration:
            self._frame = self._loop.request_frame(self._tick)
        else:
            self._frame = None
            self.done = True

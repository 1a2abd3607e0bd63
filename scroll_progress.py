"""
Scroll progress: raw page position in [0, 1] smoothed through a spring.

The spring is a plain numeric integrator so the same constants can be
handed to the page script (see `utils.scroll_script`) and stay in sync.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from scheduling import CooperativeLoop, FrameHandle

logger = logging.getLogger(__name__)

BACK_TO_TOP_THRESHOLD = 0.15
STEP_MS = 1.0


@dataclass(frozen=True)
class SpringConfig:
    stiffness: float = 100.0
    damping: float = 10.0
    mass: float = 1.0
    rest_delta: float = 0.0005
    rest_speed: float = 0.001


# progress bar under the header
HEADER_SPRING = SpringConfig(stiffness=120, damping=20, mass=0.2)


class Spring:
    def __init__(self, config: SpringConfig = HEADER_SPRING, value: float = 0.0):
        self.config = config
        self.value = value
        self.velocity = 0.0
        self.target = value

    @property
    def at_rest(self) -> bool:
        return (abs(self.target - self.value) <= self.config.rest_delta
                and abs(self.velocity) <= self.config.rest_speed)

    def step(self, dt_ms: float) -> float:
        """Integrate `dt_ms` of motion towards `target` (semi-implicit Euler, 1 ms steps)."""
        cfg = self.config
        remaining = max(0.0, dt_ms)
        while remaining > 0:
            h = min(STEP_MS, remaining) / 1000.0
            force = -cfg.stiffness * (self.value - self.target) - cfg.damping * self.velocity
            self.velocity += force / cfg.mass * h
            self.value += self.velocity * h
            remaining -= STEP_MS
            if self.at_rest:
                break
        if self.at_rest:
            self.value = self.target
            self.velocity = 0.0
        return self.value


def raw_progress(scroll_top: float, scroll_height: float, viewport_height: float) -> float:
    scrollable = scroll_height - viewport_height
    if scrollable <= 0:
        return 0.0
    return min(1.0, max(0.0, scroll_top / scrollable))


class ScrollProgressTracker:
    """
    Follows page scroll and exposes the smoothed progress plus the
    back-to-top visibility flag. Listeners get `(value, show_back_to_top)`
    after every frame that moved the value.
    """

    def __init__(self, loop: CooperativeLoop, spring: SpringConfig = HEADER_SPRING,
                 threshold: float = BACK_TO_TOP_THRESHOLD):
        self._loop = loop
        self._spring = Spring(spring)
        self.threshold = threshold
        self.show_back_to_top = False
        self._listeners: List[Callable[[float, bool], None]] = []
        self._frame: Optional[FrameHandle] = None
        self._last_frame: Optional[float] = None
        self._disposed = False

    @property
    def value(self) -> float:
        return min(1.0, max(0.0, self._spring.value))

    @property
    def target(self) -> float:
        return self._spring.target

    def on_scroll(self, scroll_top: float, scroll_height: float, viewport_height: float) -> None:
        if self._disposed:
            return
        self._spring.target = raw_progress(scroll_top, scroll_height, viewport_height)
        if self._frame is None:
            self._last_frame = self._loop.now()
            self._frame = self._loop.request_frame(self._on_frame)

    def subscribe(self, listener: Callable[[float, bool], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispose(self) -> None:
        self._disposed = True
        if self._frame is not None:
            self._frame.cancel()
            self._frame = None
        self._listeners.clear()

    def _on_frame(self, now: float) -> None:
        dt = now - (self._last_frame if self._last_frame is not None else now)
        self._last_frame = now
        self._spring.step(dt)
        value = self.value

        show = value > self.threshold
        if show != self.show_back_to_top:
            logger.debug("Back-to-top %s at progress %.3f", "shown" if show else "hidden", value)
        self.show_back_to_top = show

        for listener in list(self._listeners):
            listener(value, show)

        if self._spring.at_rest:
            self._frame = None
            self._last_frame = None
        else:
            self._frame = self._loop.request_frame(self._on_frame)

"""Single-threaded timer and frame loop driving the page animations."""
import heapq
import itertools
import logging
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class TimerHandle:
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FrameHandle:
    def __init__(self, callback: Callable[[float], None]):
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class CooperativeLoop:
    """
    Millisecond clock with one-shot timers and per-frame callbacks.

    Nothing runs on its own: the owner moves time forward with `advance`
    / `advance_to` (fires due timers) and draws frames with `render_frame`.
    `pump(now)` does both, which is what the Streamlit fragment calls.
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._timers: List[Tuple[float, int, TimerHandle]] = []
        self._frames: List[FrameHandle] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    # ── timers ──
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self._now + max(0.0, delay_ms), callback)
        heapq.heappush(self._timers, (handle.due, next(self._seq), handle))
        return handle

    def advance(self, ms: float) -> None:
        self.advance_to(self._now + ms)

    def advance_to(self, t: float) -> None:
        while self._timers and self._timers[0][0] <= t:
            due, _, handle = heapq.heappop(self._timers)
            if handle.cancelled:
                continue
            self._now = max(self._now, due)
            try:
                handle.callback()
            except Exception:
                logger.exception("Timer callback failed")
        self._now = max(self._now, t)

    # ── frames ──
    def request_frame(self, callback: Callable[[float], None]) -> FrameHandle:
        handle = FrameHandle(callback)
        self._frames.append(handle)
        return handle

    def render_frame(self) -> int:
        """Run every frame callback requested so far; returns how many ran."""
        batch, self._frames = self._frames, []
        ran = 0
        for handle in batch:
            if handle.cancelled:
                continue
            try:
                handle.callback(self._now)
            except Exception:
                logger.exception("Frame callback failed")
            ran += 1
        return ran

    def pump(self, now: float) -> None:
        self.advance_to(now)
        self.render_frame()

    # ── introspection ──
    def pending_timers(self) -> int:
        return sum(1 for _, _, h in self._timers if not h.cancelled)

    def pending_frames(self) -> int:
        return sum(1 for h in self._frames if not h.cancelled)

    def next_due(self) -> Optional[float]:
        live = [due for due, _, h in self._timers if not h.cancelled]
        return min(live) if live else None

    @property
    def idle(self) -> bool:
        return self.pending_timers() == 0 and self.pending_frames() == 0

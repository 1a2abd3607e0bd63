import os
from typing import Callable, List, Optional, Sequence

from scheduling import CooperativeLoop, TimerHandle

TYPE_DELAY_MS = 80
DELETE_DELAY_MS = 60


class TypedText:
    """
    Types each phrase out one character at a time, deletes it again, then
    moves on to the next phrase. Loops forever until disposed.
    """

    def __init__(self, phrases: Sequence[str], loop: CooperativeLoop,
                 on_change: Optional[Callable[[str], None]] = None):
        self._phrases = self._checked(phrases)
        self._loop = loop
        self._on_change = on_change
        self.index = 0
        self.text = ""
        self.deleting = False
        self._timer: Optional[TimerHandle] = None

    @staticmethod
    def _checked(phrases: Sequence[str]) -> List[str]:
        phrases = list(phrases)
        if not phrases:
            raise ValueError("TypedText needs at least one phrase")
        return phrases

    @property
    def phrases(self) -> List[str]:
        return list(self._phrases)

    @property
    def current(self) -> str:
        return self._phrases[self.index % len(self._phrases)]

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        self._schedule()

    def set_phrases(self, phrases: Sequence[str]) -> None:
        self._phrases = self._checked(phrases)
        self.index %= len(self._phrases)
        # keep what is on screen a prefix of the new phrase
        self.text = os.path.commonprefix([self.text, self.current])
        if self._timer is not None:
            self._schedule()

    def dispose(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        delay = DELETE_DELAY_MS if self.deleting else TYPE_DELAY_MS
        self._timer = self._loop.call_later(delay, self._tick)

    def _tick(self) -> None:
        current = self.current
        if not self.deleting:
            self.text = current[:len(self.text) + 1]
            if len(self.text) == len(current):
                self.deleting = True
        else:
            self.text = current[:max(0, len(self.text) - 1)]
            if not self.text:
                self.deleting = False
                self.index = (self.index + 1) % len(self._phrases)
        if self._on_change:
            self._on_change(self.text)
        self._schedule()

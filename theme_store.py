import json
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> "ThemePreference":
        return ThemePreference.LIGHT if self is ThemePreference.DARK else ThemePreference.DARK


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class JsonFileStore:
    """String key/value pairs kept in a single JSON object on disk."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")


class ThemeStore:
    """
    Light/dark preference shared by the whole page.

    The stored value wins; without one the system signal decides, and light
    is the fallback when neither says anything. Every change is pushed to
    `apply` (the page root) and written back to the store.
    """

    def __init__(self, store: KeyValueStore, apply: Callable[[ThemePreference], None],
                 system_prefers_dark: Optional[Callable[[], Optional[bool]]] = None,
                 key: str = THEME_KEY):
        self._store = store
        self._apply = apply
        self._system_prefers_dark = system_prefers_dark
        self._key = key
        self.preference = self.get_initial()
        self._sync()

    def get_initial(self) -> ThemePreference:
        saved = self._store.get(self._key)
        if saved:
            return ThemePreference.DARK if saved == ThemePreference.DARK.value else ThemePreference.LIGHT
        if self._system_prefers_dark is not None and self._system_prefers_dark():
            return ThemePreference.DARK
        return ThemePreference.LIGHT

    @property
    def dark(self) -> bool:
        return self.preference is ThemePreference.DARK

    def toggle(self) -> ThemePreference:
        self.preference = self.preference.flipped()
        self._sync()
        return self.preference

    def _sync(self) -> None:
        self._apply(self.preference)
        self._store.set(self._key, self.preference.value)
        logger.debug("Theme set to %s", self.preference.value)

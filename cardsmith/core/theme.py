"""Theme preference persisted through an injected key-value store.

The preference is a single two-valued flag. When nothing has been stored the
caller's system preference is used; once the user picks a theme, the stored
value wins.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Optional, Protocol

from cardsmith.core.logging import get_logger

logger = get_logger(__name__)

Theme = Literal["dark", "light"]

THEME_KEY = "theme"
THEMES: tuple[Theme, ...] = ("dark", "light")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Process-local store, mostly for tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Flat JSON object on disk; rewritten on every ``set``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable store file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(self.path)
        logger.debug("Stored %s=%s in %s", key, value, self.path)


def _coerce(value: Optional[str]) -> Optional[Theme]:
    if value in THEMES:
        return value  # type: ignore[return-value]
    return None


class ThemePreference:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def stored(self) -> Optional[Theme]:
        return _coerce(self.store.get(THEME_KEY))

    def resolve(self, system: Optional[str] = None) -> Theme:
        """Stored theme if any, else the system preference, else light."""
        return self.stored() or _coerce(system) or "light"

    def apply(self, theme: Theme) -> Theme:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r}")
        self.store.set(THEME_KEY, theme)
        return theme

    def toggle(self, system: Optional[str] = None) -> Theme:
        current = self.resolve(system)
        return self.apply("light" if current == "dark" else "dark")

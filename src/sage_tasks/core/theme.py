# src/sage_tasks/core/theme.py

from __future__ import annotations

import logging
from enum import StrEnum

from .ports import PersistenceStore

logger = logging.getLogger(__name__)

THEME_KEY = "sageTheme"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_store(cls, raw: str | None) -> Theme | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class ThemePreference:
    """
    Light/dark preference stored under its own key.

    Not part of the task state: read/write failures are logged and ignored.
    """

    def __init__(
        self,
        kv: PersistenceStore,
        *,
        key: str = THEME_KEY,
        default: Theme | str = Theme.LIGHT,
    ) -> None:
        self._kv = kv
        self._key = key
        self._default = Theme.from_store(str(default)) or Theme.LIGHT
        self._current = self._default

    @property
    def current(self) -> Theme:
        return self._current

    @property
    def is_dark(self) -> bool:
        return self._current is Theme.DARK

    def load(self) -> Theme:
        stored: Theme | None = None
        try:
            stored = Theme.from_store(self._kv.get(self._key))
        except Exception:
            logger.debug("Theme read failed key=%s", self._key, exc_info=True)

        if stored is None:
            self.apply(self._default)
        else:
            self._current = stored
        return self._current

    def apply(self, theme: Theme | str) -> Theme:
        self._current = Theme(theme)
        try:
            self._kv.set(self._key, self._current.value)
        except Exception:
            logger.debug("Theme write failed key=%s", self._key, exc_info=True)
        return self._current

    def toggle(self) -> Theme:
        return self.apply(Theme.LIGHT if self.is_dark else Theme.DARK)

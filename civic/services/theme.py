"""Light/dark theme preference in the theme_preference slot."""

import logging

from civic.storage.adapter import STORAGE_KEYS, StoreAdapter

LOG = logging.getLogger("civic.services.theme")

THEMES = ("light", "dark")


class ThemePreference:
    """Stored theme with a configurable default."""

    def __init__(self, adapter: StoreAdapter, default: str = "dark") -> None:
        if default not in THEMES:
            raise ValueError(f"Unknown theme {default!r}; expected light or dark")
        self.adapter = adapter
        self.default = default

    def current(self) -> str:
        value = self.adapter.get(STORAGE_KEYS["theme"], self.default)
        return value if value in THEMES else self.default

    def set(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}; expected light or dark")
        self.adapter.set(STORAGE_KEYS["theme"], theme)
        LOG.debug("Theme -> %s", theme)

    def toggle(self) -> str:
        """Flip light/dark and return the new theme."""
        new = "dark" if self.current() == "light" else "light"
        self.set(new)
        return new

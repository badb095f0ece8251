"""App theme choices and the settings container that holds the selection."""

from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar

from loguru import logger

from .observable import Observable

T = TypeVar("T")

_DARK_SUFFIX = "Dark"


class AppTheme(str, Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"
    BLUE = "blue"
    BLUE_DARK = "blueDark"
    GREEN = "green"
    GREEN_DARK = "greenDark"

    @property
    def color_scheme(self) -> Optional[str]:
        """``None`` means follow the device appearance."""
        if self is AppTheme.SYSTEM:
            return None
        if self in (AppTheme.DARK, AppTheme.BLUE_DARK, AppTheme.GREEN_DARK):
            return "dark"
        return "light"

    @property
    def primary_color(self) -> tuple[float, float, float]:
        if self in (AppTheme.BLUE, AppTheme.BLUE_DARK):
            return (0.1, 0.3, 0.7)
        if self in (AppTheme.GREEN, AppTheme.GREEN_DARK):
            return (0.2, 0.6, 0.3)
        return (0.0, 0.48, 1.0)  # platform default accent

    @property
    def display_name(self) -> str:
        if self.value.endswith(_DARK_SUFFIX):
            return f"{self.base_theme.capitalize()} Dark"
        return self.value.capitalize()

    @property
    def base_theme(self) -> str:
        if self.value.endswith(_DARK_SUFFIX):
            return self.value[: -len(_DARK_SUFFIX)]
        return self.value


def grouped_themes() -> dict[str, list[AppTheme]]:
    """Group selectable themes by base name, keys sorted, system excluded."""
    groups: dict[str, list[AppTheme]] = {}
    for theme in AppTheme:
        if theme is AppTheme.SYSTEM:
            continue
        groups.setdefault(theme.base_theme, []).append(theme)
    return {key: groups[key] for key in sorted(groups)}


class ThemeSettings(Observable):
    """Holds the selected theme for the presentation layer."""

    def __init__(self, selected_theme: AppTheme = AppTheme.SYSTEM) -> None:
        super().__init__()
        self._selected = AppTheme(selected_theme)

    @property
    def selected_theme(self) -> AppTheme:
        return self._selected

    def select(self, theme: AppTheme | str) -> None:
        target = AppTheme(theme)
        if target is self._selected:
            return
        logger.debug("Theme changed: {} -> {}", self._selected.value, target.value)
        self._selected = target
        self._publish()

    @property
    def use_system_appearance(self) -> bool:
        return self._selected is AppTheme.SYSTEM

    @use_system_appearance.setter
    def use_system_appearance(self, enabled: bool) -> None:
        self.select(AppTheme.SYSTEM if enabled else AppTheme.LIGHT)

    def adaptive_color(self, dark: T, light: T, system_is_dark: bool = False) -> T:
        """Pick *dark* or *light* for the current theme.

        The system theme defers to *system_is_dark*, the device appearance.
        """
        scheme = self._selected.color_scheme
        if scheme is None:
            return dark if system_is_dark else light
        return dark if scheme == "dark" else light

"""Tests for theme choices and settings (theme.py)."""

from __future__ import annotations

import pytest

from axer.theme import AppTheme, ThemeSettings, grouped_themes


class TestAppTheme:
    @pytest.mark.parametrize(
        "theme, scheme",
        [
            (AppTheme.SYSTEM, None),
            (AppTheme.LIGHT, "light"),
            (AppTheme.BLUE, "light"),
            (AppTheme.GREEN_DARK, "dark"),
            (AppTheme.DARK, "dark"),
        ],
    )
    def test_color_scheme(self, theme: AppTheme, scheme: str | None) -> None:
        assert theme.color_scheme == scheme

    def test_display_names(self) -> None:
        assert AppTheme.SYSTEM.display_name == "System"
        assert AppTheme.BLUE_DARK.display_name == "Blue Dark"
        assert AppTheme.GREEN.display_name == "Green"

    def test_base_theme(self) -> None:
        assert AppTheme.BLUE_DARK.base_theme == "blue"
        assert AppTheme.DARK.base_theme == "dark"
        assert AppTheme.LIGHT.base_theme == "light"

    def test_primary_color_shared_by_variants(self) -> None:
        assert AppTheme.BLUE.primary_color == AppTheme.BLUE_DARK.primary_color
        assert AppTheme.GREEN.primary_color != AppTheme.BLUE.primary_color

    def test_grouped_themes(self) -> None:
        groups = grouped_themes()
        assert list(groups) == ["blue", "dark", "green", "light"]
        assert groups["blue"] == [AppTheme.BLUE, AppTheme.BLUE_DARK]
        assert all(AppTheme.SYSTEM not in themes for themes in groups.values())


class TestThemeSettings:
    def test_select_publishes_once(self) -> None:
        settings = ThemeSettings()
        seen: list[int] = []
        settings.subscribe(seen.append)

        settings.select("greenDark")
        settings.select(AppTheme.GREEN_DARK)

        assert settings.selected_theme is AppTheme.GREEN_DARK
        assert seen == [1]

    def test_select_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            ThemeSettings().select("purple")

    def test_use_system_appearance(self) -> None:
        settings = ThemeSettings(AppTheme.BLUE)
        assert settings.use_system_appearance is False

        settings.use_system_appearance = True
        assert settings.selected_theme is AppTheme.SYSTEM

        settings.use_system_appearance = False
        assert settings.selected_theme is AppTheme.LIGHT

    def test_adaptive_color(self) -> None:
        settings = ThemeSettings()
        assert settings.adaptive_color("black", "white") == "white"
        assert settings.adaptive_color("black", "white", system_is_dark=True) == "black"

        settings.select(AppTheme.BLUE_DARK)
        assert settings.adaptive_color("black", "white") == "black"

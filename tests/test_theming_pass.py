"""Tests for the theming pass and the settings change controller."""

from __future__ import annotations

from typing import Any

import pytest

from themingkit.errors import InvalidArgumentError
from themingkit.preferences import SettingKind
from themingkit.services.settings import InMemoryPreferenceStore, ThemingPreferences
from themingkit.theme import DesignGeneration, LightDarkMode, PlatformTier
from themingkit.theme.resolver import ThemeHandles
from themingkit.theming import apply_theming
from themingkit.ui import ThemingController


class _RecordingSink:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def apply_theme(self, handle: Any) -> None:
        self.calls.append(("theme", handle))

    def apply_light_dark_mode(self, mode: LightDarkMode) -> None:
        self.calls.append(("mode", mode))

    def apply_accent(self, color: str) -> None:
        self.calls.append(("accent", color))


def test_apply_theming_applies_theme_then_mode_then_accent(handles: ThemeHandles) -> None:
    store = InMemoryPreferenceStore({"light_dark_mode": "dark", "accent_color": "#ff9800"})
    sink = _RecordingSink()

    resolution = apply_theming(sink, PlatformTier.MODERN_B, handles, ThemingPreferences(store))

    assert resolution.generation is DesignGeneration.MODERN_DYNAMIC_PALETTE
    assert sink.calls == [
        ("theme", handles.modern_dynamic),
        ("mode", LightDarkMode.DARK),
        ("accent", "#ff9800"),
    ]


def test_apply_theming_uses_bundled_themes_by_default() -> None:
    sink = _RecordingSink()

    resolution = apply_theming(sink, PlatformTier.LEGACY, preferences=ThemingPreferences(InMemoryPreferenceStore()))

    assert resolution.handle.name == "classic"
    assert sink.calls[0] == ("theme", resolution.handle)


def test_controller_persists_and_reloads_on_change() -> None:
    store = InMemoryPreferenceStore()
    reloads: list[int] = []
    controller = ThemingController(
        ThemingPreferences(store), PlatformTier.MODERN_B, reload=lambda: reloads.append(1)
    )
    picker_before = controller.descriptors()[3]

    handled = controller.on_value_changed(SettingKind.CUSTOM_ACCENT_ON_MODERN_TOGGLE, True)

    assert handled is True
    assert reloads == [1]
    assert picker_before.enabled is False
    assert controller.descriptors()[3].enabled is True
    assert controller.configuration().use_custom_accent_on_modern_platform is True


def test_controller_rejects_invalid_values_without_reloading() -> None:
    reloads: list[int] = []
    controller = ThemingController(
        ThemingPreferences(InMemoryPreferenceStore()), PlatformTier.MODERN_A, reload=lambda: reloads.append(1)
    )

    with pytest.raises(InvalidArgumentError):
        controller.on_value_changed("light_dark_mode", "sepia")

    assert reloads == []

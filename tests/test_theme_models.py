"""Unit tests for the theming data model and the bundled theme registry."""

from __future__ import annotations

import re
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from themingkit.errors import ErrorCode, InvalidArgumentError
from themingkit.theme import (
    DesignGeneration,
    LightDarkMode,
    PlatformTier,
    Theme,
    ThemeConfiguration,
    ThemeManager,
    normalize_color,
)


def test_configuration_defaults_accent_color() -> None:
    config = ThemeConfiguration(use_modern_design=True, light_dark_mode=LightDarkMode.DARK)

    assert config.accent_color == "#3385ff"
    assert config.use_custom_accent_on_modern_platform is False


def test_configuration_normalizes_accent_spellings() -> None:
    short = ThemeConfiguration(use_modern_design=False, light_dark_mode=LightDarkMode.LIGHT, accent_color="#F00")
    triple = ThemeConfiguration(use_modern_design=False, light_dark_mode=LightDarkMode.LIGHT, accent_color="255, 0, 0")

    assert short == triple
    assert short.accent_color == "#ff0000"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "#12",
        "not-a-color",
        "1,2",
        object(),
        "#-1-1-1",
        "#+f+f+f",
        "#12 345",
        "# ff ff",
        "#-12",
        "#\u0661\u0662\u0663",
        (float("inf"), 0, 0),
        (float("nan"), 0, 0),
        [1e999, 0, 0],
    ],
)
def test_configuration_rejects_invalid_accent(value: object) -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        ThemeConfiguration(use_modern_design=True, light_dark_mode=LightDarkMode.LIGHT, accent_color=value)  # type: ignore[arg-type]

    assert excinfo.value.error_code == ErrorCode.INVALID_COLOR


@pytest.mark.parametrize("value", ["#abc", "ABCDEF", "  #3385FF  ", "0x10, 300, -4", (12, 34, 56), [255.0, 0, 1]])
def test_accepted_accent_is_always_a_lowercase_hex_token(value: object) -> None:
    config = ThemeConfiguration(use_modern_design=True, light_dark_mode=LightDarkMode.LIGHT, accent_color=value)  # type: ignore[arg-type]

    assert re.fullmatch(r"#[0-9a-f]{6}", config.accent_color)


def test_configuration_rejects_missing_required_fields() -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        ThemeConfiguration()  # type: ignore[call-arg]

    assert excinfo.value.error_code == ErrorCode.INVALID_CONFIGURATION
    assert excinfo.value.details == {"missing": ["use_modern_design", "light_dark_mode"]}

    with pytest.raises(InvalidArgumentError) as excinfo:
        ThemeConfiguration(use_modern_design=True)  # type: ignore[call-arg]

    assert excinfo.value.details == {"missing": ["light_dark_mode"]}


def test_configuration_rejects_wrongly_typed_fields() -> None:
    with pytest.raises(InvalidArgumentError):
        ThemeConfiguration(use_modern_design="yes", light_dark_mode=LightDarkMode.LIGHT)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        ThemeConfiguration(use_modern_design=True, light_dark_mode="dark")  # type: ignore[arg-type]


def test_configuration_is_immutable() -> None:
    config = ThemeConfiguration(use_modern_design=True, light_dark_mode=LightDarkMode.LIGHT)

    with pytest.raises(FrozenInstanceError):
        config.use_modern_design = False  # type: ignore[misc]


@pytest.mark.parametrize(
    ("tier", "modern", "mode"),
    [
        (PlatformTier.LEGACY, False, LightDarkMode.LIGHT),
        (PlatformTier.MODERN_A, True, LightDarkMode.FOLLOW_SYSTEM),
        (PlatformTier.MODERN_B, True, LightDarkMode.FOLLOW_SYSTEM),
    ],
)
def test_configuration_defaults_depend_on_tier(tier: PlatformTier, modern: bool, mode: LightDarkMode) -> None:
    config = ThemeConfiguration.defaults(tier)

    assert config.use_modern_design is modern
    assert config.light_dark_mode is mode


def test_light_dark_mode_parses_stored_tokens() -> None:
    assert LightDarkMode.parse("battery") is LightDarkMode.BATTERY_SAVER
    assert LightDarkMode.parse("FOLLOW_SYSTEM") is LightDarkMode.FOLLOW_SYSTEM
    with pytest.raises(InvalidArgumentError):
        LightDarkMode.parse("dusk")


def test_normalize_color_clamps_sequences() -> None:
    assert normalize_color((300, -5, 12)) == (255, 0, 12)


def test_theme_serialization_round_trip() -> None:
    original = Theme(
        name="Custom",
        title="Custom",
        generation=DesignGeneration.MODERN_FIXED_PALETTE,
        light_palette={"background": (1, 2, 3), "foreground": "#ffffff"},
        dark_palette={"background": "10, 20, 30"},
        metadata={"qt_style": "Fusion"},
    )

    restored = Theme.from_json(original.to_json())

    assert restored.name == "custom"
    assert restored.generation is DesignGeneration.MODERN_FIXED_PALETTE
    assert restored.color("foreground") == (255, 255, 255)
    assert restored.color("background", dark=True) == (10, 20, 30)
    assert restored.metadata["qt_style"] == "Fusion"


def test_theme_color_falls_back_to_light_palette() -> None:
    theme = Theme(name="plain", title="Plain", light_palette={"accent": (1, 1, 1)})

    assert theme.color("accent", dark=True) == (1, 1, 1)
    assert theme.color("missing", fallback=(9, 9, 9)) == (9, 9, 9)
    with pytest.raises(KeyError):
        theme.color("missing")


def test_theme_manager_handles_cover_each_generation() -> None:
    handles = ThemeManager().handles()

    assert handles.classic.generation is DesignGeneration.CLASSIC
    assert handles.modern_fixed.generation is DesignGeneration.MODERN_FIXED_PALETTE
    assert handles.modern_dynamic.generation is DesignGeneration.MODERN_DYNAMIC_PALETTE
    assert handles.modern_dynamic.metadata["dynamic_colors"] is True


def test_theme_manager_export_and_import(tmp_path: Path) -> None:
    manager = ThemeManager()
    export_path = manager.export_theme(DesignGeneration.CLASSIC, tmp_path / "classic.json")

    replacement = Theme(name="sepia", title="Sepia", light_palette={"background": (240, 230, 210)})
    replacement_path = tmp_path / "sepia.json"
    replacement_path.write_text(replacement.to_json(), encoding="utf-8")

    other = ThemeManager()
    imported = other.import_theme(replacement_path)

    assert imported.name == "sepia"
    assert other.handles().classic is imported
    assert other.find("sepia") is imported
    assert Theme.from_json(export_path.read_text(encoding="utf-8")).name == "classic"


def test_theme_manager_import_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidArgumentError):
        ThemeManager().import_theme(path)

"""Registry of bundled theme definitions and JSON import/export helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping

from ..errors import ErrorCode, InvalidArgumentError
from .models import ColorTuple, DesignGeneration, Theme
from .resolver import ThemeHandles

LOGGER = logging.getLogger(__name__)

_CLASSIC_LIGHT: Dict[str, ColorTuple] = {
    "background": (250, 250, 250),
    "surface": (255, 255, 255),
    "surface_alt": (238, 238, 238),
    "border": (224, 224, 224),
    "foreground": (33, 33, 33),
    "text_muted": (117, 117, 117),
    "accent": (51, 133, 255),
    "selection": (187, 222, 251),
    "selection_foreground": (33, 33, 33),
    "link": (25, 118, 210),
}

_CLASSIC_DARK: Dict[str, ColorTuple] = {
    "background": (18, 18, 18),
    "surface": (33, 33, 33),
    "surface_alt": (48, 48, 48),
    "border": (66, 66, 66),
    "foreground": (238, 238, 238),
    "text_muted": (158, 158, 158),
    "accent": (51, 133, 255),
    "selection": (38, 79, 120),
    "selection_foreground": (255, 255, 255),
    "link": (100, 181, 246),
}

_MODERN_LIGHT: Dict[str, ColorTuple] = {
    "background": (254, 247, 255),
    "surface": (254, 247, 255),
    "surface_alt": (243, 237, 247),
    "border": (121, 116, 126),
    "foreground": (29, 27, 32),
    "text_muted": (73, 69, 79),
    "accent": (51, 133, 255),
    "selection": (234, 221, 255),
    "selection_foreground": (33, 0, 93),
    "link": (103, 80, 164),
}

_MODERN_DARK: Dict[str, ColorTuple] = {
    "background": (20, 18, 24),
    "surface": (20, 18, 24),
    "surface_alt": (33, 31, 38),
    "border": (147, 143, 153),
    "foreground": (230, 224, 233),
    "text_muted": (202, 196, 208),
    "accent": (51, 133, 255),
    "selection": (79, 55, 139),
    "selection_foreground": (234, 221, 255),
    "link": (208, 188, 255),
}


def build_classic_theme() -> Theme:
    return Theme(
        name="classic",
        title="Classic",
        generation=DesignGeneration.CLASSIC,
        description="Flat classic design with a configurable accent.",
        light_palette=_CLASSIC_LIGHT,
        dark_palette=_CLASSIC_DARK,
        metadata={"qt_style": "Fusion"},
    )


def build_modern_fixed_theme() -> Theme:
    return Theme(
        name="modern",
        title="Modern",
        generation=DesignGeneration.MODERN_FIXED_PALETTE,
        description="Modern design tinted by the configured accent color.",
        light_palette=_MODERN_LIGHT,
        dark_palette=_MODERN_DARK,
        metadata={"qt_style": "Fusion"},
    )


def build_modern_dynamic_theme() -> Theme:
    return Theme(
        name="modern-dynamic",
        title="Modern (dynamic colors)",
        generation=DesignGeneration.MODERN_DYNAMIC_PALETTE,
        description="Modern design that defers to the platform's dynamic palette.",
        light_palette=_MODERN_LIGHT,
        dark_palette=_MODERN_DARK,
        metadata={"qt_style": "Fusion", "dynamic_colors": True},
    )


class ThemeManager:
    """Registry holding exactly one theme definition per design generation."""

    def __init__(self, themes: Iterable[Theme] | None = None) -> None:
        self._themes: Dict[DesignGeneration, Theme] = {
            theme.generation: theme
            for theme in (build_classic_theme(), build_modern_fixed_theme(), build_modern_dynamic_theme())
        }
        for theme in themes or ():
            self.register(theme)

    def register(self, theme: Theme) -> None:
        previous = self._themes.get(theme.generation)
        if previous is not None and previous.name != theme.name:
            LOGGER.debug("Replacing %s theme %s with %s", theme.generation.value, previous.name, theme.name)
        self._themes[theme.generation] = theme

    def get(self, generation: DesignGeneration) -> Theme:
        return self._themes[generation]

    def find(self, name: str) -> Theme:
        key = name.strip().lower()
        for theme in self._themes.values():
            if theme.name == key:
                return theme
        raise KeyError(f"Unknown theme '{name}'")

    def handles(self) -> ThemeHandles:
        return ThemeHandles(
            classic=self._themes[DesignGeneration.CLASSIC],
            modern_fixed=self._themes[DesignGeneration.MODERN_FIXED_PALETTE],
            modern_dynamic=self._themes[DesignGeneration.MODERN_DYNAMIC_PALETTE],
        )

    def export_theme(self, generation: DesignGeneration, destination: str | Path, *, indent: int = 2) -> Path:
        path = Path(destination)
        path.write_text(json.dumps(self.get(generation).to_dict(), indent=indent), encoding="utf-8")
        return path

    def import_theme(self, source: str | Path) -> Theme:
        path = Path(source)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InvalidArgumentError(
                error_code=ErrorCode.INVALID_CONFIGURATION,
                message=f"Theme file {path} is not valid JSON",
            ) from exc
        if not isinstance(payload, Mapping):
            raise InvalidArgumentError(message="Theme file must contain a JSON object")
        theme = Theme.from_dict(payload)
        self.register(theme)
        return theme


theme_manager = ThemeManager()


def default_handles() -> ThemeHandles:
    return theme_manager.handles()


__all__ = [
    "ThemeManager",
    "build_classic_theme",
    "build_modern_dynamic_theme",
    "build_modern_fixed_theme",
    "default_handles",
    "theme_manager",
]

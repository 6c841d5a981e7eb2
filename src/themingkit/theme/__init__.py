"""Theme module consolidating configuration types, resolution, and the registry."""

from .models import (
    DEFAULT_ACCENT_COLOR,
    ColorTuple,
    DesignGeneration,
    LightDarkMode,
    PlatformTier,
    Theme,
    ThemeConfiguration,
    normalize_color,
    normalize_hex,
)
from .resolver import ThemeHandles, ThemeResolution, ThemeResolver, resolve_theme
from .manager import (
    ThemeManager,
    build_classic_theme,
    build_modern_dynamic_theme,
    build_modern_fixed_theme,
    default_handles,
    theme_manager,
)

__all__ = [
    "ColorTuple",
    "DEFAULT_ACCENT_COLOR",
    "DesignGeneration",
    "LightDarkMode",
    "PlatformTier",
    "Theme",
    "ThemeConfiguration",
    "ThemeHandles",
    "ThemeManager",
    "ThemeResolution",
    "ThemeResolver",
    "build_classic_theme",
    "build_modern_dynamic_theme",
    "build_modern_fixed_theme",
    "default_handles",
    "normalize_color",
    "normalize_hex",
    "resolve_theme",
    "theme_manager",
]

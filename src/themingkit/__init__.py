"""Resolve visual themes and theming settings controls from stored preferences."""

from .errors import ErrorCode, InvalidArgumentError, ThemingError
from .preferences import (
    ControlType,
    IconSelector,
    PreferenceKeys,
    SettingDescriptor,
    SettingKind,
    SettingsDescriptorBuilder,
    SummaryMode,
    build_descriptors,
)
from .services import InMemoryPreferenceStore, JsonPreferenceStore, ThemingPreferences
from .theme import (
    DEFAULT_ACCENT_COLOR,
    DesignGeneration,
    LightDarkMode,
    PlatformTier,
    Theme,
    ThemeConfiguration,
    ThemeHandles,
    ThemeResolution,
    ThemeResolver,
    resolve_theme,
)
from .theming import ThemeSink, apply_theming

__version__ = "0.1.0"

__all__ = [
    "ControlType",
    "DEFAULT_ACCENT_COLOR",
    "DesignGeneration",
    "ErrorCode",
    "IconSelector",
    "InMemoryPreferenceStore",
    "InvalidArgumentError",
    "JsonPreferenceStore",
    "LightDarkMode",
    "PlatformTier",
    "PreferenceKeys",
    "SettingDescriptor",
    "SettingKind",
    "SettingsDescriptorBuilder",
    "SummaryMode",
    "Theme",
    "ThemeConfiguration",
    "ThemeHandles",
    "ThemeResolution",
    "ThemeResolver",
    "ThemeSink",
    "ThemingError",
    "ThemingPreferences",
    "apply_theming",
    "build_descriptors",
    "resolve_theme",
]

"""Settings-control descriptors for the theming preferences."""

from .keys import PreferenceKeys, SettingKind
from .descriptors import (
    ACCENT_COLOR_CHOICES,
    ControlType,
    IconSelector,
    PreferenceOption,
    SettingDescriptor,
    SettingsDescriptorBuilder,
    SummaryMode,
    build_descriptors,
)

__all__ = [
    "ACCENT_COLOR_CHOICES",
    "ControlType",
    "IconSelector",
    "PreferenceKeys",
    "PreferenceOption",
    "SettingDescriptor",
    "SettingKind",
    "SettingsDescriptorBuilder",
    "SummaryMode",
    "build_descriptors",
]

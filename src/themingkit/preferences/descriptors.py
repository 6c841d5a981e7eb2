"""Derivation of settings-control state from the stored theming configuration.

The builder never renders anything. It produces :class:`SettingDescriptor`
value objects that a host's settings layer turns into widgets. The four
descriptors always come back in :class:`SettingKind` order so that controls
render after the controls they depend on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from ..theme.models import DEFAULT_ACCENT_COLOR, LightDarkMode, PlatformTier, ThemeConfiguration
from ..theme.resolver import require_configuration, require_tier
from .keys import PreferenceKeys, SettingKind


class SummaryMode(Enum):
    FIXED_TEXT = "fixed_text"
    DERIVED_FROM_VALUE = "derived_from_value"


class ControlType(Enum):
    SWITCH = "switch"
    LIST = "list"
    COLOR_PICKER = "color_picker"


class IconSelector(Enum):
    LIGHT_MODE = "light_mode"
    DARK_MODE = "dark_mode"
    BATTERY_SAVER = "battery_saver"
    FOLLOW_SYSTEM = "follow_system"
    PALETTE = "palette"


MODERN_DESIGN_TITLE = "Modern design"
MODERN_DESIGN_SUMMARY = "Use the newer visual design"
LIGHT_DARK_MODE_TITLE = "Theme"
CUSTOM_ACCENT_TITLE = "Custom colors with modern design"
MODERN_DESIGN_INACTIVE_SUMMARY = "Modern design is not applied"
ACCENT_COLOR_TITLE = "Accent color"
DYNAMIC_COLORS_SUMMARY = "Using the platform's dynamic colors"

LIGHT_DARK_MODE_LABELS = {
    LightDarkMode.LIGHT: "Light",
    LightDarkMode.DARK: "Dark",
    LightDarkMode.BATTERY_SAVER: "Set by Battery Saver",
    LightDarkMode.FOLLOW_SYSTEM: "Follow system",
}

ACCENT_COLOR_CHOICES: Tuple[str, ...] = (
    DEFAULT_ACCENT_COLOR,
    "#f44336",
    "#e91e63",
    "#9c27b0",
    "#673ab7",
    "#3f51b5",
    "#03a9f4",
    "#00bcd4",
    "#009688",
    "#4caf50",
    "#8bc34a",
    "#ffc107",
    "#ff9800",
    "#ff5722",
    "#795548",
    "#607d8b",
)

_LIGHT_DARK_MODE_ICONS = {
    LightDarkMode.LIGHT: IconSelector.LIGHT_MODE,
    LightDarkMode.DARK: IconSelector.DARK_MODE,
    LightDarkMode.BATTERY_SAVER: IconSelector.BATTERY_SAVER,
    LightDarkMode.FOLLOW_SYSTEM: IconSelector.FOLLOW_SYSTEM,
}


@dataclass(frozen=True, slots=True)
class PreferenceOption:
    value: str
    label: str


@dataclass(frozen=True, slots=True)
class SettingDescriptor:
    """State and display metadata for one settings control.

    ``static_summary`` is only set when ``summary_mode`` is
    :attr:`SummaryMode.FIXED_TEXT`; otherwise the host mirrors the current
    value (or the selected option's label) as the summary.
    """

    key: str
    setting: SettingKind
    control: ControlType
    title: str
    enabled: bool
    visible: bool
    icon_selector: IconSelector | None
    summary_mode: SummaryMode
    static_summary: str | None
    default_value: Any
    options: Tuple[PreferenceOption, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "setting": self.setting.value,
            "control": self.control.value,
            "title": self.title,
            "enabled": self.enabled,
            "visible": self.visible,
            "icon": self.icon_selector.value if self.icon_selector else None,
            "summary_mode": self.summary_mode.value,
            "summary": self.static_summary,
            "default_value": self.default_value,
            "options": [{"value": option.value, "label": option.label} for option in self.options],
        }


def icon_for_mode(mode: LightDarkMode) -> IconSelector:
    return _LIGHT_DARK_MODE_ICONS[mode]


def light_dark_mode_choices(tier: PlatformTier) -> Tuple[LightDarkMode, ...]:
    """Modes offered on ``tier``; following the system needs a modern platform."""

    if tier >= PlatformTier.MODERN_A:
        return (
            LightDarkMode.LIGHT,
            LightDarkMode.DARK,
            LightDarkMode.BATTERY_SAVER,
            LightDarkMode.FOLLOW_SYSTEM,
        )
    return (LightDarkMode.LIGHT, LightDarkMode.DARK, LightDarkMode.BATTERY_SAVER)


def accent_picker_enabled(config: ThemeConfiguration, tier: PlatformTier) -> bool:
    """Explicit opt-in beats suppression by the platform's dynamic colors."""

    if config.use_custom_accent_on_modern_platform:
        return True
    return not (config.use_modern_design and tier >= PlatformTier.MODERN_B)


class SettingsDescriptorBuilder:
    """Builds the ordered theming control descriptors."""

    def __init__(self, keys: PreferenceKeys | None = None) -> None:
        self._keys = keys or PreferenceKeys()

    @property
    def keys(self) -> PreferenceKeys:
        return self._keys

    def build(self, config: ThemeConfiguration, tier: PlatformTier) -> Tuple[SettingDescriptor, ...]:
        config = require_configuration(config)
        tier = require_tier(tier)
        return (
            self._modern_design_toggle(tier),
            self._light_dark_mode_selector(config, tier),
            self._custom_accent_toggle(config),
            self._accent_color_picker(config, tier),
        )

    def _modern_design_toggle(self, tier: PlatformTier) -> SettingDescriptor:
        return SettingDescriptor(
            key=self._keys.design_mode,
            setting=SettingKind.MODERN_DESIGN_TOGGLE,
            control=ControlType.SWITCH,
            title=MODERN_DESIGN_TITLE,
            enabled=True,
            visible=True,
            icon_selector=None,
            summary_mode=SummaryMode.FIXED_TEXT,
            static_summary=MODERN_DESIGN_SUMMARY,
            default_value=tier >= PlatformTier.MODERN_A,
        )

    def _light_dark_mode_selector(self, config: ThemeConfiguration, tier: PlatformTier) -> SettingDescriptor:
        options = tuple(
            PreferenceOption(value=mode.value, label=LIGHT_DARK_MODE_LABELS[mode])
            for mode in light_dark_mode_choices(tier)
        )
        return SettingDescriptor(
            key=self._keys.light_dark_mode,
            setting=SettingKind.LIGHT_DARK_MODE_SELECTOR,
            control=ControlType.LIST,
            title=LIGHT_DARK_MODE_TITLE,
            enabled=True,
            visible=True,
            icon_selector=icon_for_mode(config.light_dark_mode),
            summary_mode=SummaryMode.DERIVED_FROM_VALUE,
            static_summary=None,
            default_value=LightDarkMode.default_for(tier).value,
            options=options,
        )

    def _custom_accent_toggle(self, config: ThemeConfiguration) -> SettingDescriptor:
        enabled = config.use_modern_design
        return SettingDescriptor(
            key=self._keys.custom_accent_opt_in,
            setting=SettingKind.CUSTOM_ACCENT_ON_MODERN_TOGGLE,
            control=ControlType.SWITCH,
            title=CUSTOM_ACCENT_TITLE,
            enabled=enabled,
            visible=True,
            icon_selector=None,
            summary_mode=SummaryMode.DERIVED_FROM_VALUE if enabled else SummaryMode.FIXED_TEXT,
            static_summary=None if enabled else MODERN_DESIGN_INACTIVE_SUMMARY,
            default_value=False,
        )

    def _accent_color_picker(self, config: ThemeConfiguration, tier: PlatformTier) -> SettingDescriptor:
        enabled = accent_picker_enabled(config, tier)
        return SettingDescriptor(
            key=self._keys.accent_color,
            setting=SettingKind.ACCENT_COLOR_PICKER,
            control=ControlType.COLOR_PICKER,
            title=ACCENT_COLOR_TITLE,
            enabled=enabled,
            visible=True,
            icon_selector=IconSelector.PALETTE,
            summary_mode=SummaryMode.DERIVED_FROM_VALUE if enabled else SummaryMode.FIXED_TEXT,
            static_summary=None if enabled else DYNAMIC_COLORS_SUMMARY,
            default_value=DEFAULT_ACCENT_COLOR,
            options=tuple(PreferenceOption(value=color, label=color) for color in ACCENT_COLOR_CHOICES),
        )


def build_descriptors(
    config: ThemeConfiguration,
    tier: PlatformTier,
    *,
    keys: PreferenceKeys | None = None,
) -> Tuple[SettingDescriptor, ...]:
    """Return the four theming control descriptors for ``config`` on ``tier``."""

    return SettingsDescriptorBuilder(keys).build(config, tier)


__all__ = [
    "ACCENT_COLOR_CHOICES",
    "ControlType",
    "IconSelector",
    "LIGHT_DARK_MODE_LABELS",
    "PreferenceOption",
    "SettingDescriptor",
    "SettingsDescriptorBuilder",
    "SummaryMode",
    "accent_picker_enabled",
    "build_descriptors",
    "icon_for_mode",
    "light_dark_mode_choices",
]

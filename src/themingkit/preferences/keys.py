"""Identifiers for the four theming controls and their storage keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ErrorCode, InvalidArgumentError


class SettingKind(Enum):
    """Theming controls, declared in the order they must be rendered."""

    MODERN_DESIGN_TOGGLE = "modern_design_toggle"
    LIGHT_DARK_MODE_SELECTOR = "light_dark_mode_selector"
    CUSTOM_ACCENT_ON_MODERN_TOGGLE = "custom_accent_on_modern_toggle"
    ACCENT_COLOR_PICKER = "accent_color_picker"


@dataclass(frozen=True, slots=True)
class PreferenceKeys:
    """Storage keys for each control; hosts may rename them to fit their store."""

    design_mode: str = "design_mode"
    light_dark_mode: str = "light_dark_mode"
    custom_accent_opt_in: str = "custom_accent_opt_in"
    accent_color: str = "accent_color"

    def __post_init__(self) -> None:
        keys = [self.design_mode, self.light_dark_mode, self.custom_accent_opt_in, self.accent_color]
        if any(not isinstance(key, str) or not key.strip() for key in keys):
            raise InvalidArgumentError(message="Preference keys must be non-empty strings")
        if len(set(keys)) != len(keys):
            raise InvalidArgumentError(
                message="Preference keys must be distinct",
                details={"keys": keys},
            )

    def key_for(self, setting: SettingKind) -> str:
        if setting is SettingKind.MODERN_DESIGN_TOGGLE:
            return self.design_mode
        if setting is SettingKind.LIGHT_DARK_MODE_SELECTOR:
            return self.light_dark_mode
        if setting is SettingKind.CUSTOM_ACCENT_ON_MODERN_TOGGLE:
            return self.custom_accent_opt_in
        return self.accent_color

    def setting_for(self, key: str) -> SettingKind:
        for setting in SettingKind:
            if self.key_for(setting) == key:
                return setting
        raise InvalidArgumentError(
            error_code=ErrorCode.UNKNOWN_PREFERENCE_KEY,
            message=f"Unknown preference key '{key}'",
            details={"known": [self.key_for(setting) for setting in SettingKind]},
        )


__all__ = ["PreferenceKeys", "SettingKind"]

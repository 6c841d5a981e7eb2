"""Key-value preference stores and the theming configuration adapter."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Protocol

from ..errors import InvalidArgumentError
from ..preferences.keys import PreferenceKeys, SettingKind
from ..theme.models import (
    DEFAULT_ACCENT_COLOR,
    LightDarkMode,
    PlatformTier,
    ThemeConfiguration,
    normalize_hex,
)
from ..theme.resolver import require_tier

__all__ = [
    "InMemoryPreferenceStore",
    "JsonPreferenceStore",
    "PreferenceStore",
    "ThemingPreferences",
    "coerce_value",
]

LOGGER = logging.getLogger(__name__)
_PREFERENCES_DIR = Path.home() / ".themingkit"
_DEFAULT_PREFERENCES_PATH = _PREFERENCES_DIR / "preferences.json"
_ENV_OVERRIDES: Mapping[str, SettingKind] = {
    "THEMINGKIT_MODERN_DESIGN": SettingKind.MODERN_DESIGN_TOGGLE,
    "THEMINGKIT_LIGHT_DARK_MODE": SettingKind.LIGHT_DARK_MODE_SELECTOR,
    "THEMINGKIT_CUSTOM_ACCENT": SettingKind.CUSTOM_ACCENT_ON_MODERN_TOGGLE,
    "THEMINGKIT_ACCENT_COLOR": SettingKind.ACCENT_COLOR_PICKER,
}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class PreferenceStore(Protocol):
    """Key-value interface the theming preferences are read from and written to."""

    def get(self, key: str, default: Any = None) -> Any:  # pragma: no cover - protocol stub
        ...

    def set(self, key: str, value: Any) -> None:  # pragma: no cover - protocol stub
        ...


class InMemoryPreferenceStore:
    """Dictionary-backed store for tests and embedding hosts."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)


class JsonPreferenceStore:
    """Persists preferences to a JSON file with atomic writes."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_PREFERENCES_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        return self._read_payload().get(key, default)

    def set(self, key: str, value: Any) -> None:
        payload = self._read_payload()
        payload[key] = value
        self._write_payload(payload)

    def update(self, values: Mapping[str, Any]) -> None:
        payload = self._read_payload()
        payload.update(values)
        self._write_payload(payload)

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            LOGGER.warning("Preferences file %s is not valid JSON: %s", self._path, exc)
            return {}
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Unable to read preferences file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Preferences file %s does not contain a JSON object", self._path)
            return {}
        return data

    def _write_payload(self, payload: Mapping[str, Any]) -> None:
        body = json.dumps(dict(payload), indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Preferences saved to %s (%d keys)", self._path, len(payload))


class ThemingPreferences:
    """Reads and writes :class:`ThemeConfiguration` through a preference store."""

    def __init__(self, store: PreferenceStore | None = None, *, keys: PreferenceKeys | None = None) -> None:
        self._store = store if store is not None else JsonPreferenceStore()
        self._keys = keys or PreferenceKeys()

    @property
    def store(self) -> PreferenceStore:
        return self._store

    @property
    def keys(self) -> PreferenceKeys:
        return self._keys

    def load(self, tier: PlatformTier, *, overrides: Mapping[str, Any] | None = None) -> ThemeConfiguration:
        """Load the stored configuration, applying tier defaults, overrides, then the environment."""

        tier = require_tier(tier)
        defaults = ThemeConfiguration.defaults(tier)
        values: Dict[SettingKind, Any] = {}
        for setting in SettingKind:
            raw = self._store.get(self._keys.key_for(setting))
            if raw is None:
                continue
            try:
                values[setting] = coerce_value(setting, raw)
            except InvalidArgumentError as exc:
                LOGGER.warning(
                    "Ignoring stored %s=%r: %s", self._keys.key_for(setting), raw, exc.message
                )

        if overrides:
            values.update(self._coerce_overrides(overrides, source="runtime"))
        values.update(self._env_overrides())

        config = ThemeConfiguration(
            use_modern_design=values.get(SettingKind.MODERN_DESIGN_TOGGLE, defaults.use_modern_design),
            light_dark_mode=values.get(SettingKind.LIGHT_DARK_MODE_SELECTOR, defaults.light_dark_mode),
            use_custom_accent_on_modern_platform=values.get(
                SettingKind.CUSTOM_ACCENT_ON_MODERN_TOGGLE,
                defaults.use_custom_accent_on_modern_platform,
            ),
            accent_color=values.get(SettingKind.ACCENT_COLOR_PICKER, DEFAULT_ACCENT_COLOR),
        )
        LOGGER.debug("Theming configuration loaded for tier %s: %s", tier.name, config.to_dict())
        return config

    def save(self, config: ThemeConfiguration) -> None:
        values = {self._keys.key_for(setting): value for setting, value in _stored_values(config).items()}
        bulk_update = getattr(self._store, "update", None)
        if callable(bulk_update):
            bulk_update(values)
            return
        for key, value in values.items():
            self._store.set(key, value)

    def write(self, setting: SettingKind | str, value: Any) -> Any:
        """Validate and persist a single control value, returning the stored form."""

        if not isinstance(setting, SettingKind):
            setting = self._keys.setting_for(setting)
        stored = _to_stored(coerce_value(setting, value))
        self._store.set(self._keys.key_for(setting), stored)
        return stored

    def _coerce_overrides(self, overrides: Mapping[str, Any], *, source: str) -> Dict[SettingKind, Any]:
        coerced: Dict[SettingKind, Any] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            setting = self._keys.setting_for(key)
            coerced[setting] = coerce_value(setting, value)
        if coerced:
            LOGGER.debug(
                "Applying %s theming overrides: %s", source, sorted(self._keys.key_for(s) for s in coerced)
            )
        return coerced

    def _env_overrides(self) -> Dict[SettingKind, Any]:
        overrides: Dict[SettingKind, Any] = {}
        for env_name, setting in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            try:
                overrides[setting] = coerce_value(setting, value)
            except InvalidArgumentError:
                LOGGER.warning("Environment override %s=%s is not valid", env_name, value)
        return overrides


def coerce_value(setting: SettingKind, value: Any) -> Any:
    """Convert a stored or user-supplied value into its typed form."""

    if setting is SettingKind.LIGHT_DARK_MODE_SELECTOR:
        return LightDarkMode.parse(value)
    if setting is SettingKind.ACCENT_COLOR_PICKER:
        return normalize_hex(value)
    return _parse_bool(value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
    raise InvalidArgumentError(message=f"Expected a boolean, received {value!r}")


def _to_stored(value: Any) -> Any:
    if isinstance(value, LightDarkMode):
        return value.value
    return value


def _stored_values(config: ThemeConfiguration) -> Dict[SettingKind, Any]:
    return {
        SettingKind.MODERN_DESIGN_TOGGLE: config.use_modern_design,
        SettingKind.LIGHT_DARK_MODE_SELECTOR: config.light_dark_mode.value,
        SettingKind.CUSTOM_ACCENT_ON_MODERN_TOGGLE: config.use_custom_accent_on_modern_platform,
        SettingKind.ACCENT_COLOR_PICKER: config.accent_color,
    }

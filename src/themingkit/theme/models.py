"""Data structures describing theming configuration and theme definitions."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, Mapping, Sequence, Tuple

from ..errors import ErrorCode, InvalidArgumentError

ColorTuple = Tuple[int, int, int]
PaletteLike = Mapping[str, Any] | Sequence[tuple[str, Any]]

DEFAULT_ACCENT_COLOR = "#3385ff"
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")
_MISSING: Any = object()


class PlatformTier(IntEnum):
    """Capability level of the host runtime, ordered from oldest to newest."""

    LEGACY = 0
    MODERN_A = 1
    MODERN_B = 2

    @classmethod
    def parse(cls, value: Any) -> "PlatformTier":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key in cls.__members__:
                return cls[key]
        elif isinstance(value, int) and not isinstance(value, bool):
            if value in cls._value2member_map_:
                return cls(value)
        raise InvalidArgumentError(
            error_code=ErrorCode.INVALID_PLATFORM_TIER,
            message=f"Unknown platform tier {value!r}",
            details={"choices": [member.name.lower() for member in cls]},
        )


class DesignGeneration(Enum):
    CLASSIC = "classic"
    MODERN_FIXED_PALETTE = "modern_fixed_palette"
    MODERN_DYNAMIC_PALETTE = "modern_dynamic_palette"


class LightDarkMode(Enum):
    """User preference for light or dark rendering; values are the stored tokens."""

    LIGHT = "light"
    DARK = "dark"
    BATTERY_SAVER = "battery"
    FOLLOW_SYSTEM = "system"

    @classmethod
    def parse(cls, value: Any) -> "LightDarkMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text in (member.value, member.name.lower()):
                    return member
        raise InvalidArgumentError(
            message=f"Unknown light/dark mode {value!r}",
            details={"choices": [member.value for member in cls]},
        )

    @classmethod
    def default_for(cls, tier: PlatformTier) -> "LightDarkMode":
        return cls.FOLLOW_SYSTEM if tier >= PlatformTier.MODERN_A else cls.LIGHT


def _clamp_channel(value: Any) -> int:
    channel = int(value)
    if channel < 0:
        return 0
    if channel > 255:
        return 255
    return channel


def _invalid_color(value: Any, reason: str) -> InvalidArgumentError:
    return InvalidArgumentError(
        error_code=ErrorCode.INVALID_COLOR,
        message=reason,
        details={"value": repr(value)},
    )


def normalize_color(value: Any) -> ColorTuple:
    """Convert ``value`` into an RGB tuple, accepting hex strings or sequences."""

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise _invalid_color(value, "Color strings cannot be empty")
        if text.startswith("#"):
            text = text[1:]
        try:
            if "," in text:
                parts = [part.strip() for part in text.split(",") if part.strip()]
                if len(parts) != 3:
                    raise _invalid_color(value, f"Color '{value}' must have exactly 3 components")
                return tuple(_clamp_channel(int(part, 0)) for part in parts)  # type: ignore[return-value]
            if _HEX_DIGITS.fullmatch(text):
                if len(text) == 3:
                    text = "".join(ch * 2 for ch in text)
                return tuple(int(text[i : i + 2], 16) for i in range(0, 6, 2))  # type: ignore[return-value]
        except ValueError as exc:
            if isinstance(exc, InvalidArgumentError):
                raise
            raise _invalid_color(value, f"Unsupported color format: {value!r}") from exc
        raise _invalid_color(value, f"Unsupported color format: {value!r}")

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        items = list(value)
        if len(items) != 3:
            raise _invalid_color(value, f"RGB sequences must contain 3 values, received {value!r}")
        try:
            return tuple(_clamp_channel(component) for component in items)  # type: ignore[return-value]
        except (TypeError, ValueError, OverflowError) as exc:
            raise _invalid_color(value, f"RGB components must be integers, received {value!r}") from exc

    raise _invalid_color(value, f"Cannot convert {type(value)!r} to an RGB color")


def to_hex(value: ColorTuple) -> str:
    return "#" + "".join(f"{component:02x}" for component in value)


def normalize_hex(value: Any) -> str:
    """Return ``value`` as a lowercase ``#rrggbb`` token."""

    return to_hex(normalize_color(value))


@dataclass(frozen=True, slots=True)
class ThemeConfiguration:
    """Stored, user-editable theming state.

    ``accent_color`` is normalized to ``#rrggbb`` on construction, so two
    configurations that spell the same color differently compare equal.
    """

    use_modern_design: bool = _MISSING
    light_dark_mode: LightDarkMode = _MISSING
    use_custom_accent_on_modern_platform: bool = False
    accent_color: str = DEFAULT_ACCENT_COLOR

    def __post_init__(self) -> None:
        missing = [name for name in ("use_modern_design", "light_dark_mode") if getattr(self, name) is _MISSING]
        if missing:
            raise InvalidArgumentError(
                message=f"Missing required configuration fields: {', '.join(missing)}",
                details={"missing": missing},
            )
        for name in ("use_modern_design", "use_custom_accent_on_modern_platform"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidArgumentError(
                    message=f"{name} must be a bool",
                    details={"field": name, "value": repr(getattr(self, name))},
                )
        if not isinstance(self.light_dark_mode, LightDarkMode):
            raise InvalidArgumentError(
                message="light_dark_mode must be a LightDarkMode",
                details={"field": "light_dark_mode", "value": repr(self.light_dark_mode)},
            )
        accent = self.accent_color if self.accent_color is not None else DEFAULT_ACCENT_COLOR
        object.__setattr__(self, "accent_color", normalize_hex(accent))

    @classmethod
    def defaults(cls, tier: PlatformTier) -> "ThemeConfiguration":
        """Return the configuration a fresh store holds on ``tier``."""

        return cls(
            use_modern_design=tier >= PlatformTier.MODERN_A,
            light_dark_mode=LightDarkMode.default_for(tier),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "use_modern_design": self.use_modern_design,
            "light_dark_mode": self.light_dark_mode.value,
            "use_custom_accent_on_modern_platform": self.use_custom_accent_on_modern_platform,
            "accent_color": self.accent_color,
        }


def _normalize_palette(palette: PaletteLike | None) -> Dict[str, ColorTuple]:
    normalized: Dict[str, ColorTuple] = {}
    if palette is None:
        return normalized
    items: Sequence[tuple[str, Any]]
    if isinstance(palette, Mapping):
        items = list(palette.items())
    else:
        items = list(palette)
    for key, value in items:
        if key is None:
            continue
        normalized[key.strip().lower()] = normalize_color(value)
    return normalized


@dataclass(slots=True)
class Theme:
    """Serializable theme definition for one design generation.

    Instances are what the bundled registry hands to the resolver as handles.
    ``light_palette`` and ``dark_palette`` hold the role colors for each
    appearance; sinks pick one based on the active :class:`LightDarkMode`.
    """

    name: str
    title: str
    generation: DesignGeneration = DesignGeneration.CLASSIC
    light_palette: Dict[str, ColorTuple] = field(default_factory=dict)
    dark_palette: Dict[str, ColorTuple] = field(default_factory=dict)
    description: str | None = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.name = (self.name or "default").strip().lower() or "default"
        self.title = (self.title or self.name.title()).strip()
        self.generation = DesignGeneration(self.generation)
        self.light_palette = _normalize_palette(self.light_palette)
        self.dark_palette = _normalize_palette(self.dark_palette)
        self.metadata = dict(self.metadata or {})

    def palette(self, *, dark: bool = False) -> Dict[str, ColorTuple]:
        if dark and self.dark_palette:
            return self.dark_palette
        return self.light_palette or self.dark_palette

    def color(self, key: str, *, dark: bool = False, fallback: ColorTuple | None = None) -> ColorTuple:
        palette = self.palette(dark=dark)
        lookup = key.strip().lower()
        if lookup in palette:
            return palette[lookup]
        if fallback is not None:
            return fallback
        raise KeyError(f"Theme '{self.name}' has no '{lookup}' color")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "generation": self.generation.value,
            "description": self.description,
            "metadata": dict(self.metadata),
            "light_palette": {key: list(value) for key, value in self.light_palette.items()},
            "dark_palette": {key: list(value) for key, value in self.dark_palette.items()},
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Theme":
        if "name" not in payload:
            raise InvalidArgumentError(message="Theme payload missing 'name'")
        try:
            generation = DesignGeneration(payload.get("generation") or DesignGeneration.CLASSIC.value)
        except ValueError as exc:
            raise InvalidArgumentError(
                message=f"Unknown design generation {payload.get('generation')!r}",
            ) from exc
        description = payload.get("description")
        return cls(
            name=str(payload["name"]),
            title=str(payload.get("title") or payload["name"]),
            generation=generation,
            light_palette=payload.get("light_palette") or {},
            dark_palette=payload.get("dark_palette") or {},
            description=str(description) if description is not None else None,
            metadata=dict(payload.get("metadata") or {}),
        )

    @classmethod
    def from_json(cls, text: str) -> "Theme":
        data = json.loads(text)
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(message="Theme JSON root must be an object")
        return cls.from_dict(data)


__all__ = [
    "ColorTuple",
    "DEFAULT_ACCENT_COLOR",
    "DesignGeneration",
    "LightDarkMode",
    "PlatformTier",
    "Theme",
    "ThemeConfiguration",
    "normalize_color",
    "normalize_hex",
    "to_hex",
]

"""Selection of the theme definition to activate for a configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, NamedTuple

from ..errors import ErrorCode, InvalidArgumentError
from .models import DesignGeneration, LightDarkMode, PlatformTier, ThemeConfiguration

LOGGER = logging.getLogger(__name__)


class ThemeHandles(NamedTuple):
    """The three theme definitions a host supplies, in resolver order."""

    classic: Any
    modern_fixed: Any
    modern_dynamic: Any


@dataclass(frozen=True, slots=True)
class ThemeResolution:
    """Outcome of a resolution pass.

    ``accent_directive`` is always the configured accent color. On
    :attr:`DesignGeneration.MODERN_DYNAMIC_PALETTE` the platform's dynamic
    palette may still override it visually.
    """

    handle: Any
    accent_directive: str
    generation: DesignGeneration
    light_dark_mode: LightDarkMode


def select_generation(config: ThemeConfiguration, tier: PlatformTier) -> DesignGeneration:
    if not config.use_modern_design:
        return DesignGeneration.CLASSIC
    if tier <= PlatformTier.MODERN_A:
        return DesignGeneration.MODERN_FIXED_PALETTE
    return DesignGeneration.MODERN_DYNAMIC_PALETTE


def require_configuration(config: Any) -> ThemeConfiguration:
    if not isinstance(config, ThemeConfiguration):
        raise InvalidArgumentError(
            message="A ThemeConfiguration is required",
            details={"received": type(config).__name__},
        )
    return config


def require_tier(tier: Any) -> PlatformTier:
    if not isinstance(tier, PlatformTier):
        raise InvalidArgumentError(
            error_code=ErrorCode.INVALID_PLATFORM_TIER,
            message="A PlatformTier is required",
            details={"received": repr(tier)},
        )
    return tier


class ThemeResolver:
    """Resolves configurations against a fixed set of injected theme handles."""

    def __init__(self, classic: Any, modern_fixed: Any, modern_dynamic: Any) -> None:
        missing = [
            name
            for name, handle in (
                ("classic", classic),
                ("modern_fixed", modern_fixed),
                ("modern_dynamic", modern_dynamic),
            )
            if handle is None
        ]
        if missing:
            raise InvalidArgumentError(
                error_code=ErrorCode.MISSING_THEME_HANDLE,
                message=f"Theme handle(s) not supplied: {', '.join(missing)}",
                details={"missing": missing},
            )
        self._handles = ThemeHandles(classic, modern_fixed, modern_dynamic)

    @classmethod
    def from_handles(cls, handles: ThemeHandles) -> "ThemeResolver":
        return cls(*handles)

    @property
    def handles(self) -> ThemeHandles:
        return self._handles

    def resolve(self, config: ThemeConfiguration, tier: PlatformTier) -> ThemeResolution:
        """Pick the handle for ``config`` on ``tier``.

        Opting out of the modern design always yields the classic handle,
        whatever the platform supports.
        """

        config = require_configuration(config)
        tier = require_tier(tier)
        generation = select_generation(config, tier)
        if generation is DesignGeneration.CLASSIC:
            handle = self._handles.classic
        elif generation is DesignGeneration.MODERN_FIXED_PALETTE:
            handle = self._handles.modern_fixed
        else:
            handle = self._handles.modern_dynamic
        LOGGER.debug(
            "Resolved %s theme for tier %s (accent=%s)",
            generation.value,
            tier.name,
            config.accent_color,
        )
        return ThemeResolution(
            handle=handle,
            accent_directive=config.accent_color,
            generation=generation,
            light_dark_mode=config.light_dark_mode,
        )


def resolve_theme(
    config: ThemeConfiguration,
    tier: PlatformTier,
    classic_handle: Any,
    modern_fixed_handle: Any,
    modern_dynamic_handle: Any,
) -> ThemeResolution:
    """Return the theme handle and accent directive for ``config`` on ``tier``."""

    return ThemeResolver(classic_handle, modern_fixed_handle, modern_dynamic_handle).resolve(config, tier)


__all__ = [
    "ThemeHandles",
    "ThemeResolution",
    "ThemeResolver",
    "require_configuration",
    "require_tier",
    "resolve_theme",
    "select_generation",
]

"""One-shot theming pass: load the stored configuration, resolve, and apply."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from .services.settings import ThemingPreferences
from .theme.manager import default_handles
from .theme.models import LightDarkMode, PlatformTier
from .theme.resolver import ThemeHandles, ThemeResolution, ThemeResolver

LOGGER = logging.getLogger(__name__)


class ThemeSink(Protocol):
    """Applies resolved theming to the host's active rendering context."""

    def apply_theme(self, handle: Any) -> None:  # pragma: no cover - protocol stub
        ...

    def apply_light_dark_mode(self, mode: LightDarkMode) -> None:  # pragma: no cover - protocol stub
        ...

    def apply_accent(self, color: str) -> None:  # pragma: no cover - protocol stub
        ...


def apply_theming(
    sink: ThemeSink,
    tier: PlatformTier,
    handles: ThemeHandles | None = None,
    preferences: ThemingPreferences | None = None,
) -> ThemeResolution:
    """Resolve the stored configuration and push it into ``sink``.

    The theme is applied before the light/dark mode and the accent, so sinks
    may layer those on top of the selected definition.
    """

    resolver = ThemeResolver.from_handles(handles or default_handles())
    active_preferences = preferences or ThemingPreferences()
    config = active_preferences.load(tier)
    resolution = resolver.resolve(config, tier)
    sink.apply_theme(resolution.handle)
    sink.apply_light_dark_mode(resolution.light_dark_mode)
    sink.apply_accent(resolution.accent_directive)
    LOGGER.info(
        "Applied %s theming (mode=%s, accent=%s)",
        resolution.generation.value,
        resolution.light_dark_mode.value,
        resolution.accent_directive,
    )
    return resolution


__all__ = ["ThemeSink", "apply_theming"]

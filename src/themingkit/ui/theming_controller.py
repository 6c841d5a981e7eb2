"""Glue between a settings screen and the theming core.

Every value change is persisted and followed by a full reload; the core keeps
no incremental state between passes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

from ..preferences.descriptors import SettingDescriptor, SettingsDescriptorBuilder
from ..preferences.keys import SettingKind
from ..services.settings import ThemingPreferences
from ..theme.models import PlatformTier, ThemeConfiguration
from ..theme.resolver import require_tier

_LOGGER = logging.getLogger(__name__)


class ThemingController:
    """Builds descriptors for the stored configuration and handles control changes."""

    def __init__(
        self,
        preferences: ThemingPreferences,
        tier: PlatformTier,
        *,
        reload: Callable[[], None],
    ) -> None:
        self._preferences = preferences
        self._tier = require_tier(tier)
        self._reload = reload
        self._builder = SettingsDescriptorBuilder(preferences.keys)

    @property
    def tier(self) -> PlatformTier:
        return self._tier

    def configuration(self) -> ThemeConfiguration:
        return self._preferences.load(self._tier)

    def descriptors(self) -> Tuple[SettingDescriptor, ...]:
        return self._builder.build(self.configuration(), self._tier)

    def on_value_changed(self, setting: SettingKind | str, value: Any) -> bool:
        """Persist ``value`` for ``setting`` and trigger a reload.

        Returns ``True`` so it can be wired directly as a change listener.
        """

        stored = self._preferences.write(setting, value)
        _LOGGER.debug("Theming preference %s changed to %r; reloading", setting, stored)
        self._reload()
        return True


__all__ = ["ThemingController"]

"""PySide6 implementation of the theme application sink."""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QGuiApplication, QPalette

from ..errors import InvalidArgumentError
from ..theme.models import ColorTuple, LightDarkMode, Theme, normalize_color

_LOGGER = logging.getLogger(__name__)

_ROLE_FALLBACKS: tuple[tuple[str, str, ColorTuple], ...] = (
    ("Window", "background", (250, 250, 250)),
    ("WindowText", "foreground", (33, 33, 33)),
    ("Base", "surface", (255, 255, 255)),
    ("AlternateBase", "surface_alt", (238, 238, 238)),
    ("Text", "foreground", (33, 33, 33)),
    ("Button", "surface", (255, 255, 255)),
    ("ButtonText", "foreground", (33, 33, 33)),
    ("PlaceholderText", "text_muted", (117, 117, 117)),
)


def _contrast_text(rgb: ColorTuple) -> ColorTuple:
    red, green, blue = rgb
    return (0, 0, 0) if (red * 299 + green * 587 + blue * 114) / 1000 >= 150 else (255, 255, 255)


class QtThemeSink:
    """Applies resolved themes, light/dark mode, and accents to a ``QGuiApplication``.

    Each call re-applies the full palette, so the order of calls only matters
    for the final state, not for correctness.
    """

    def __init__(self, app: Any | None = None) -> None:
        self._app = app
        self._theme: Theme | None = None
        self._mode = LightDarkMode.FOLLOW_SYSTEM
        self._accent: ColorTuple | None = None

    @property
    def app(self) -> Any:
        return self._app if self._app is not None else QGuiApplication.instance()

    @property
    def theme(self) -> Theme | None:
        return self._theme

    def apply_theme(self, handle: Any) -> None:
        if not isinstance(handle, Theme):
            raise InvalidArgumentError(
                message="QtThemeSink can only apply Theme definitions",
                details={"received": type(handle).__name__},
            )
        self._theme = handle
        style_name = handle.metadata.get("qt_style")
        style_setter = getattr(self.app, "setStyle", None)
        if style_name and callable(style_setter):
            style_setter(style_name)
        self._refresh()

    def apply_light_dark_mode(self, mode: LightDarkMode) -> None:
        self._mode = LightDarkMode.parse(mode)
        hints = self._style_hints()
        setter = getattr(hints, "setColorScheme", None)
        if callable(setter):
            if self._mode is LightDarkMode.DARK:
                setter(Qt.ColorScheme.Dark)
            elif self._mode is LightDarkMode.LIGHT:
                setter(Qt.ColorScheme.Light)
            else:
                setter(Qt.ColorScheme.Unknown)
        else:
            _LOGGER.debug("Qt style hints cannot override the color scheme; using palette only")
        self._refresh()

    def apply_accent(self, color: str) -> None:
        self._accent = normalize_color(color)
        self._refresh()

    def is_dark(self) -> bool:
        if self._mode is LightDarkMode.DARK:
            return True
        if self._mode is LightDarkMode.LIGHT:
            return False
        hints = self._style_hints()
        getter = getattr(hints, "colorScheme", None)
        if callable(getter):
            return getter() == Qt.ColorScheme.Dark
        return False

    def build_palette(self) -> QPalette:
        if self._theme is None:
            raise InvalidArgumentError(message="No theme has been applied yet")
        dark = self.is_dark()
        palette = QPalette()
        for role_name, key, fallback in _ROLE_FALLBACKS:
            rgb = self._theme.color(key, dark=dark, fallback=fallback)
            palette.setColor(getattr(QPalette.ColorRole, role_name), QColor(*rgb))

        accent = self._accent or self._theme.color("accent", dark=dark, fallback=(51, 133, 255))
        palette.setColor(QPalette.ColorRole.Highlight, QColor(*accent))
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor(*_contrast_text(accent)))
        palette.setColor(QPalette.ColorRole.Link, QColor(*accent))
        accent_role = getattr(QPalette.ColorRole, "Accent", None)
        if accent_role is not None:
            palette.setColor(accent_role, QColor(*accent))
        return palette

    def _refresh(self) -> None:
        if self._theme is None:
            return
        app = self.app
        if app is None:
            _LOGGER.debug("No Qt application instance; deferring palette update")
            return
        app.setPalette(self.build_palette())

    def _style_hints(self) -> Any:
        app = self.app
        getter = getattr(app, "styleHints", None) if app is not None else None
        return getter() if callable(getter) else None


__all__ = ["QtThemeSink"]

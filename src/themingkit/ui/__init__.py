"""Host-facing helpers; the PySide6 sink lives in :mod:`themingkit.ui.qt_theming`."""

from .theming_controller import ThemingController

__all__ = ["ThemingController"]

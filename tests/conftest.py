"""Shared pytest fixtures."""

import os

import pytest

from themingkit.theme.resolver import ThemeHandles
from themingkit.utils import logging as logging_utils

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def handles() -> ThemeHandles:
    return ThemeHandles(classic=object(), modern_fixed=object(), modern_dynamic=object())


@pytest.fixture(autouse=True)
def _clear_theming_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in (
        "THEMINGKIT_MODERN_DESIGN",
        "THEMINGKIT_LIGHT_DARK_MODE",
        "THEMINGKIT_CUSTOM_ACCENT",
        "THEMINGKIT_ACCENT_COLOR",
        "THEMINGKIT_SETTINGS_PATH",
        "THEMINGKIT_TIER",
        "THEMINGKIT_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("THEMINGKIT_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(logging_utils, "_log_path", None)

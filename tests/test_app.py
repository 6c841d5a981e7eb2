"""Tests for the themingkit command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from themingkit import app


def _run(argv: list[str]) -> tuple[int, dict]:
    buffer = io.StringIO()
    code = app.main(argv, stdout=buffer)
    payload = json.loads(buffer.getvalue()) if code == 0 else {}
    return code, payload


def test_main_reports_resolution_and_settings(tmp_path: Path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({"design_mode": True, "accent_color": "#009688"}), encoding="utf-8")

    code, payload = _run(["--tier", "modern_b", "--settings-path", str(path)])

    assert code == 0
    assert payload["resolution"] == {
        "theme": "modern-dynamic",
        "generation": "modern_dynamic_palette",
        "light_dark_mode": "system",
        "accent": "#009688",
    }
    assert [entry["key"] for entry in payload["settings"]] == [
        "design_mode",
        "light_dark_mode",
        "custom_accent_opt_in",
        "accent_color",
    ]
    assert payload["settings"][3]["enabled"] is False


def test_main_applies_set_overrides(tmp_path: Path) -> None:
    code, payload = _run(
        ["--tier", "legacy", "--settings-path", str(tmp_path / "missing.json"), "--set", "design_mode=on"]
    )

    assert code == 0
    assert payload["resolution"]["generation"] == "modern_fixed_palette"
    assert payload["configuration"]["light_dark_mode"] == "light"


@pytest.mark.parametrize(
    "argv",
    [
        ["--tier", "future"],
        ["--set", "design_mode"],
        ["--set", "primary_color=#ffffff"],
    ],
)
def test_main_rejects_invalid_arguments(argv: list[str], tmp_path: Path) -> None:
    code, _ = _run([*argv, "--settings-path", str(tmp_path / "preferences.json")])

    assert code == 2

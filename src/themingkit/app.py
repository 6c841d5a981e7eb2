"""Command line entry point for inspecting theming resolution."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Sequence, TextIO

from .errors import InvalidArgumentError
from .preferences.descriptors import SettingsDescriptorBuilder
from .services.settings import JsonPreferenceStore, ThemingPreferences
from .theme.manager import default_handles
from .theme.models import PlatformTier
from .theme.resolver import ThemeResolver
from .utils import logging as logging_utils

_LOGGER = logging.getLogger(__name__)
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


def configure_logging(debug: bool = False, *, force: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging_utils.setup_logging(level, console=debug, force=force)
    _LOGGER.debug("Logging configured (level=%s)", logging.getLevelName(level))


def build_report(preferences: ThemingPreferences, tier: PlatformTier, *, overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Resolve the stored configuration and describe the theming controls."""

    config = preferences.load(tier, overrides=overrides)
    resolution = ThemeResolver.from_handles(default_handles()).resolve(config, tier)
    descriptors = SettingsDescriptorBuilder(preferences.keys).build(config, tier)
    handle = resolution.handle
    return {
        "tier": tier.name.lower(),
        "configuration": config.to_dict(),
        "resolution": {
            "theme": getattr(handle, "name", str(handle)),
            "generation": resolution.generation.value,
            "light_dark_mode": resolution.light_dark_mode.value,
            "accent": resolution.accent_directive,
        },
        "settings": [descriptor.to_dict() for descriptor in descriptors],
    }


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Entry point invoked by the ``themingkit`` console script."""

    args = _parse_cli_args(argv)
    debug = args.debug or _env_flag("THEMINGKIT_DEBUG")
    configure_logging(debug)

    output = stdout or sys.stdout
    try:
        tier = PlatformTier.parse(args.tier)
        overrides = _coerce_cli_overrides(args.overrides or [])
    except (InvalidArgumentError, ValueError) as exc:
        print(f"Invalid argument: {exc}", file=sys.stderr)
        return 2

    settings_path = args.settings_path or os.environ.get("THEMINGKIT_SETTINGS_PATH")
    store = JsonPreferenceStore(Path(settings_path).expanduser() if settings_path else None)
    preferences = ThemingPreferences(store)
    try:
        report = build_report(preferences, tier, overrides=overrides or None)
    except InvalidArgumentError as exc:
        print(f"Invalid argument: {exc}", file=sys.stderr)
        return 2

    output.write(json.dumps(report, indent=2))
    output.write("\n")
    return 0


def _env_flag(name: str, *, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _parse_cli_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="themingkit",
        description="Resolve the stored theming configuration and print the result as JSON.",
    )
    parser.add_argument(
        "--tier",
        default=os.environ.get("THEMINGKIT_TIER", "modern_b"),
        help="Platform tier: legacy, modern_a or modern_b (default: %(default)s).",
    )
    parser.add_argument(
        "--settings-path",
        metavar="PATH",
        help="Override the default ~/.themingkit/preferences.json path.",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Override a stored preference for this run (repeatable).",
    )
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level to the console.")
    return parser.parse_args(argv)


def _coerce_cli_overrides(items: Sequence[str]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for entry in items:
        if "=" not in entry:
            raise ValueError(f"Override '{entry}' must use KEY=VALUE syntax.")
        key, raw_value = entry.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError("Override is missing a preference key.")
        overrides[key] = raw_value.strip()
    return overrides


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())

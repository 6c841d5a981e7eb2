"""Tests for the command line logging setup."""

from __future__ import annotations

import io
import logging
import logging.handlers
from pathlib import Path

from themingkit import app
from themingkit.utils.logging import setup_logging


def _package_handlers() -> list[logging.Handler]:
    return list(logging.getLogger("themingkit").handlers)


def test_setup_logging_creates_rotating_file_under_env_dir(tmp_path: Path) -> None:
    log_path = setup_logging(logging.DEBUG)

    logging.getLogger("themingkit.services.settings").debug("stored values loaded")

    assert log_path == tmp_path / "logs" / "themingkit.log"
    assert log_path.exists()
    assert "stored values loaded" in log_path.read_text(encoding="utf-8")
    assert any(isinstance(handler, logging.handlers.RotatingFileHandler) for handler in _package_handlers())


def test_setup_logging_is_idempotent_unless_forced(tmp_path: Path) -> None:
    first = setup_logging()
    handler_count = len(_package_handlers())

    assert setup_logging(log_dir=tmp_path / "elsewhere") == first
    assert len(_package_handlers()) == handler_count

    moved = setup_logging(log_dir=tmp_path / "elsewhere", force=True)

    assert moved == tmp_path / "elsewhere" / "themingkit.log"
    assert len(_package_handlers()) == handler_count


def test_setup_logging_leaves_root_handlers_alone() -> None:
    root_handlers = list(logging.getLogger().handlers)

    setup_logging(console=True, force=True)

    assert logging.getLogger().handlers == root_handlers
    assert sum(type(handler) is logging.StreamHandler for handler in _package_handlers()) == 1


def test_debug_flag_writes_cli_log(tmp_path: Path) -> None:
    code = app.main(["--debug", "--settings-path", str(tmp_path / "preferences.json")], stdout=io.StringIO())

    assert code == 0
    log_text = (tmp_path / "logs" / "themingkit.log").read_text(encoding="utf-8")
    assert "Logging configured (level=DEBUG)" in log_text

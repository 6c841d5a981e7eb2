"""Logging setup for the ``themingkit`` command line."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

__all__ = ["setup_logging"]

_PACKAGE_LOGGER = "themingkit"
_LOG_FILENAME = "themingkit.log"
_DEFAULT_LOG_DIR = Path.home() / ".themingkit" / "logs"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_installed: list[logging.Handler] = []
_log_path: Path | None = None


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    console: bool = False,
    force: bool = False,
) -> Path:
    """Attach a rotating file handler (and optionally stderr) to the package logger.

    Only the ``themingkit`` logger is touched, so a host application's root
    handlers stay in charge of everything else. Repeated calls are no-ops unless
    ``force`` is set, in which case previously installed handlers are replaced.
    Records still propagate to the root logger.
    """

    global _log_path
    if _log_path is not None and not force:
        return _log_path

    target_dir = Path(log_dir or os.environ.get("THEMINGKIT_LOG_DIR") or _DEFAULT_LOG_DIR).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / _LOG_FILENAME

    logger = logging.getLogger(_PACKAGE_LOGGER)
    _remove_installed(logger)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=256_000, backupCount=2, encoding="utf-8"
    )
    handlers: list[logging.Handler] = [file_handler]
    if console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed.append(handler)
    logger.setLevel(level)

    _log_path = log_path
    return log_path


def _remove_installed(logger: logging.Logger) -> None:
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()

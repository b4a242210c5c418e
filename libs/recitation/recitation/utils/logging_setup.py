"""Logging initialization for the API and the CLI."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from recitation.config import LoggingSettings, Settings

_CONFIGURED_ATTR = "_recitation_configured"


def _resolve_level(name: str | None) -> int:
    level = logging.getLevelName(str(name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler(cfg: LoggingSettings, log_dir: str) -> RotatingFileHandler:
    file_path = Path(str(cfg.file))
    if not file_path.is_absolute():
        file_path = Path(log_dir) / file_path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        file_path,
        maxBytes=int(cfg.max_bytes),
        backupCount=int(cfg.backup_count),
        encoding="utf-8",
    )


def setup_logging(settings: Settings, *, level: str | None = None) -> None:
    """Route the `recitation` logger tree to the console and/or a rotating file.

    Other framework loggers (uvicorn, httpx) are left alone. Once configured,
    repeated calls are no-ops unless an explicit `level` is given (the CLI's
    `--log-level`), which reconfigures the tree at that level.
    """
    logger = logging.getLogger("recitation")
    if getattr(logger, _CONFIGURED_ATTR, False) and level is None:
        return

    cfg = settings.logging
    resolved = _resolve_level(level or cfg.level)
    formatter = logging.Formatter(fmt=str(cfg.format), datefmt=str(cfg.datefmt))

    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(logging.StreamHandler())
    if cfg.file:
        handlers.append(_file_handler(cfg, settings.log_dir))
    for handler in handlers:
        handler.setFormatter(formatter)

    logger.setLevel(resolved)
    logger.handlers = handlers
    logger.propagate = False
    setattr(logger, _CONFIGURED_ATTR, True)

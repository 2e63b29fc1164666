"""Loguru logging for the zone config tool."""

import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from zone_config.core.config import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[name]}:{function}:{line} | {message}"

_logging_configured = False


class InterceptHandler(logging.Handler):
    """Forward stdlib records (httpx) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_name == "emit":
            frame = frame.f_back
            depth += 1

        logger.bind(name=record.name).opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _normalize_level(level: Optional[str]) -> str:
    name = (level or "INFO").strip().upper()
    try:
        return logger.level(name).name
    except ValueError:
        return "INFO"


def configure_logging(level: Optional[str] = None, log_dir: Optional[str] = None, force: bool = False) -> None:
    """Install stdout and file sinks once; ``force`` reinstalls them."""
    global _logging_configured

    if _logging_configured and not force:
        return
    _logging_configured = True

    level = _normalize_level(level if level is not None else settings.LOG_LEVEL)
    log_dir = settings.LOG_DIR if log_dir is None else log_dir

    logger.remove()
    logger.configure(extra={"name": "zone_config"})
    logger.add(sys.stdout, level=level, format=LOG_FORMAT, backtrace=False, diagnose=False)
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / "zone_config.log",
            level=level,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention="14 days",
            backtrace=False,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(name: str) -> logger.__class__:
    return logger.bind(name=name)


configure_logging()

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

from as400_catalog.config.settings import settings

# Libraries whose records are dropped entirely
SILENCED_LIBRARIES = ("aiosqlite", "asyncio", "asyncssh", "httpx", "httpcore")

_configured = False

LOG_DIR = Path("logs")


def _get_log_filename() -> str:
    """Generate a log filename with current date and time."""
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return f"{timestamp}.log"


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level_name = logger.level(record.levelname).name
        except ValueError:
            level_name = record.levelno

        # Find caller from where the logging call originated
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level_name, record.getMessage()
        )


def configure_logging(level: str | None = None, log_to_file: bool = True) -> None:
    """
    Configure logging with loguru, redirect standard logging to loguru,
    and silence noisy third-party libraries.
    - level: optional override for the minimum log level; if None the level
      is inferred from settings.ENV ("development" -> DEBUG; else INFO).
    - log_to_file: when False only the stdout/stderr sink is installed
      (the CLI uses this so one-off commands don't litter logs/).
    """
    global _configured
    if _configured:
        return

    env = getattr(settings, "ENV", "development").lower()
    if level is None:
        level = "DEBUG" if env == "development" else "INFO"
    is_production = env == "production"

    logger.remove()

    if log_to_file:
        LOG_DIR.mkdir(exist_ok=True)
        log_file_path = LOG_DIR / _get_log_filename()
        file_fmt = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}"
        )
        logger.add(
            log_file_path,
            level=level,
            format=file_fmt,
            enqueue=True,
            backtrace=True,
            diagnose=True,
            encoding="utf-8",
        )

    if is_production:
        # Production: JSON structured logs to stdout
        logger.add(
            sys.stdout,
            level=level,
            serialize=True,
            enqueue=True,
            backtrace=False,
            diagnose=False,
        )
    else:
        fmt = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
        # CLI output goes to stdout, so the CLI logs to stderr instead
        logger.add(
            sys.stdout if log_to_file else sys.stderr,
            level=level,
            format=fmt,
            enqueue=True,
            backtrace=True,
            diagnose=True,
            colorize=True,
        )

    stdlib_level = logging.getLevelName(level.upper())

    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(stdlib_level)

    # Ensure uvicorn loggers also funnel through loguru
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [InterceptHandler()]
        uvicorn_logger.setLevel(stdlib_level)
        uvicorn_logger.propagate = False

    for lib_name in SILENCED_LIBRARIES:
        noisy_logger = logging.getLogger(lib_name)
        noisy_logger.setLevel(logging.CRITICAL)
        noisy_logger.propagate = False
        noisy_logger.handlers = []

    _configured = True
    logger.info(f"Logging configured: level={level}, environment={env}, file_sink={log_to_file}")

"""Logging setup: loguru sinks plus a bridge for stdlib ``logging`` records."""

import logging
import sys
from pathlib import Path

from loguru import logger

from src.bookshelf.runtime.config.config_data import LoggingConfig
from src.bookshelf.runtime.context import get_config

# The request logging middleware replaces uvicorn's access log
DROPPED_LOGGERS = frozenset({"uvicorn.access"})

# Third-party loggers that are noisy below these levels
LIBRARY_LOG_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
}

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        if record.name in DROPPED_LOGGERS:
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, verbose_tracebacks: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)
    as_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if as_json else PLAIN_FORMAT,
        serialize=as_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        compression="zip",
        enqueue=True,
        backtrace=verbose_tracebacks,
        diagnose=verbose_tracebacks,
    )


def _route_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    for name, level in LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(level)


def configure_logging() -> None:
    """Install the console sink, the optional file sink and the stdlib bridge.

    Safe to call more than once; previous loguru sinks are removed first.
    """
    config = get_config()
    cfg = config.logging
    # Variable values in tracebacks can leak secrets
    verbose_tracebacks = config.app.environment != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=PLAIN_FORMAT,
        colorize=True,
        backtrace=verbose_tracebacks,
        diagnose=verbose_tracebacks,
    )
    if cfg.file:
        _add_file_sink(cfg, verbose_tracebacks)

    _route_stdlib_logging()

    logger.debug(
        "Logging configured (level={}, format={}, file={})",
        cfg.level,
        cfg.format,
        cfg.file or "-",
    )

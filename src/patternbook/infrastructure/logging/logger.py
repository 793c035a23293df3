"""Logging setup for patternbook.

Demos narrate on stdout with ``print``; everything diagnostic (ignored
state transitions, observer failures, catalog loading) goes through the
loggers returned by :func:`get_logger`. :func:`setup_logging` wires the root
logger and layers structlog on top of it for structured key/value records.
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

if TYPE_CHECKING:
    from patternbook.config.schemas import LoggingConfig

_HANDLER_MARKER = "_patternbook_handler"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds ``module.funcName:lineno`` caller information."""

    def format(self, record: logging.LogRecord) -> str:
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name``."""
    return logging.getLogger(name)


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up logging for the application using stdlib handlers and structlog.

    Args:
        config: Logging configuration. If None, defaults from LoggingConfig are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from patternbook.config.schemas import LoggingConfig

        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both") and config.file_path:
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(file_handler)

    if config.destination in ("stderr", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(console_handler)

    if not handlers:
        # Keeps logging.lastResort from writing WARNING and above to stderr
        handlers.append(logging.NullHandler())

    # Replace only the handlers installed by a previous call
    for handler in root_logger.handlers[:]:
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        setattr(handler, _HANDLER_MARKER, True)
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("patternbook")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        log_file=config.file_path,
    )
    return logger

"""Central logging helpers"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional, Union

import structlog
import structlog.stdlib
from structlog.types import Processor

from midistream.config import settings

LOGGER_NAME = "midistream"


def _shared_processors() -> List[Processor]:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _formatter(renderer: Processor) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )


def _build_handlers(component: str) -> List[logging.Handler]:
    """Plain console output plus a rotating JSON file per component."""
    console = logging.StreamHandler()
    console.setFormatter(_formatter(structlog.dev.ConsoleRenderer(colors=False)))

    log_dir = settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_dir / f"{component}.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
    )
    file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
    return [console, file_handler]


def setup_logging(
    component: str = "midistream",
    level: Optional[Union[int, str]] = None,
) -> logging.Logger:
    """
    Route structlog events from the midistream package to its own handlers.

    Only the "midistream" stdlib logger is configured; it stops propagation so
    an application's root handlers are left alone.

    Args:
        component: Log file name stem under settings.log_dir
        level: Level name or number (defaults to settings.log_level)

    Returns:
        The configured package logger
    """
    if level is None:
        level = settings.log_level
    elif isinstance(level, str):
        level = level.upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(component):
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    package_logger.info("logging_initialized component=%s", component)
    return package_logger

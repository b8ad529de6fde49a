"""Structlog configuration.

Usage:
    from locale_detection.logging import configure_logging, get_module_logger

    # Once, at startup (the server lifespan does this)
    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")

Module loggers are lazy proxies: they pick up whatever configuration is
current when they emit, so they may be created at import time, before
configure_logging() runs.
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from locale_detection.configuration import Settings

# Nothing reaches stdout/stderr while tests run
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _processors(prod_mode: bool) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library logging module.

    Safe to call more than once; each call replaces the previous handlers
    and level.

    Args:
        settings: Settings to read LOG_LEVEL and is_production from. Loaded
            from the environment when not provided.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
        is_production: Optional override for production mode. Controls JSON vs
            console output.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        processors = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
    else:
        if settings is None:
            settings = Settings()
        prod_mode = is_production if is_production is not None else settings.is_production
        processors = _processors(prod_mode)
        effective_log_level = log_level or settings.LOG_LEVEL
        level = getattr(logging, effective_log_level.upper(), logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Loggers are reconfigured at startup and must not keep stale processors
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a lazy logger bound to the calling module.

    Example:
        # In server/lifespan.py
        logger = get_module_logger()
        # context: {"component": "lifespan", "module_path": "server.lifespan"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.stdlib.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )

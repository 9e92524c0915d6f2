"""Structlog configuration for translatable.

Modules only ask for loggers through get_module_logger(). configure_logging()
runs once on import and can be called again by the embedding application to
change the level or the renderer.

Usage:
    from translatable.logging import get_module_logger

    logger = get_module_logger()
    logger.info("loaded_translation_files", file_count=3)

Dependencies:
    - translatable.configuration.LoggingSettings
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from translatable.configuration import LoggingSettings

# Above CRITICAL, so nothing is emitted.
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(is_production: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if is_production:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Under pytest every event is dropped. Otherwise events are rendered as
    JSON in production and for the console elsewhere.

    Args:
        log_level: Override for LoggingSettings.LOG_LEVEL.
        is_production: Override for LoggingSettings.is_production.

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    testing = _is_test_environment()

    if testing:
        level = SILENT_LEVEL
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ]
    else:
        settings = LoggingSettings()
        level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
        if is_production is None:
            is_production = settings.is_production
        processors = _build_processors(is_production)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=testing)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    The logger carries component (last part of the module name) and
    module_path (full module name).

    Example:
        # In translatable/i18n/loader.py
        logger = get_module_logger()
        # context: {"component": "loader", "module_path": "translatable.i18n.loader"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None

    if not module_name:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )

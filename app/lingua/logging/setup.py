"""Structlog configuration and logger setup.

Log output is a console rendering in development and JSON in production.
Nothing is emitted while pytest is running.

Usage:
    from lingua.logging import configure_logging, get_module_logger

    configure_logging()
    logger = get_module_logger()
    logger.info("locale_resolved", locale="fr")

Dependencies:
    - lingua.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Any, Callable, Optional, Sequence

import structlog
from structlog.stdlib import BoundLogger

from lingua.configuration import settings
from lingua.logging.formatters import add_app_info, package_version

Processor = Callable[[Any, str, dict[str, Any]], Any]

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _base_processors() -> list[Processor]:
    return [
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
        add_app_info(app_version=package_version()),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _configure_silent() -> BoundLogger:
    # structlog still needs a processor chain; the root level drops everything.
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    extra_processors: Sequence[Processor] = (),
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Log level override (DEBUG, INFO, WARNING, ...).
            Defaults to settings.LOG_LEVEL.
        is_production: Production mode override; JSON output when true.
            Defaults to settings.is_production.
        extra_processors: Processors inserted before rendering.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _configure_silent()

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = _base_processors()
    processors.extend(extra_processors)
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted part) and ``module_path`` (full module
    name), e.g. ``{"component": "service", "module_path": "lingua.i18n.service"}``.
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )

"""Structlog configuration for phrasebook.

phrasebook is used as a library, so importing it never configures logging.
Module loggers are lazy structlog proxies that pick up whatever
configuration is active at their first log call. Hosts that have their own
structlog setup keep it; create_translator() applies the package defaults
only when nothing is configured yet.

Usage:
    from phrasebook.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG", is_production=False)

    logger = get_module_logger()
    logger.debug("translation_not_found", key="Hello")
"""

import inspect
import logging
import sys

import structlog
from structlog.stdlib import BoundLogger


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: str = "INFO",
    is_production: bool = True,
    force: bool = False,
) -> bool:
    """Configure structlog and the standard library root logger.

    Under pytest every event is dropped. Otherwise events are rendered as
    JSON in production and with the console renderer in development.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ...). Unknown names
            fall back to INFO.
        is_production: JSON output when True, console output otherwise.
        force: Reconfigure even if structlog is already configured.

    Returns:
        True if configuration was applied, False if an existing
        configuration was left in place.
    """
    if structlog.is_configured() and not force:
        return False

    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return True

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )
    return True


def get_module_logger() -> BoundLogger:
    """Get a lazy logger bound to the calling module.

    The logger carries ``component`` (last dotted part of the module name)
    and ``module_path`` (full module name).

    Returns:
        Lazy structlog logger with module context
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

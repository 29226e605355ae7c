"""Structured logging for the locale string library.

Every localization module logs through a structlog logger obtained from
get_module_logger(). Events are snake_case names ("locale_changed",
"localized_strings_failed_to_load") with the details passed as keyword
arguments, so a host application can filter on them in JSON output.

Log records carry the package ("localization"), the component (the last
module segment, e.g. "registry") and the full module path. Output is silent
under pytest; tests patch the module-level logger of the code under test.
"""

import logging
import inspect
import sys
from typing import Optional
import structlog
from structlog.stdlib import BoundLogger
from .config import settings

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _silence() -> BoundLogger:
    logging.root.setLevel(SILENT)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT, force=True)
    return structlog.stdlib.get_logger()


def _processors(production: bool) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for locale string events.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL. Unknown names
            fall back to INFO.
        is_production: Overrides settings.is_production. True renders JSON
            lines, False renders console output.

    Returns:
        The root bound logger that module loggers are bound from.
    """
    if _is_test_environment():
        return _silence()

    level_name = (log_level or settings.LOG_LEVEL).upper()
    production = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_processors(production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def module_context(module_name: str) -> dict:
    """Return the package, component and module_path fields for a module."""
    parts = module_name.split(".")
    return {
        "package": parts[0],
        "component": parts[-1],
        "module_path": module_name,
    }


def get_module_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to a module's context.

    Args:
        name: Dotted module name. Defaults to the calling module.
    """
    if name:
        return logger.bind(**module_context(name))

    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(**module_context(module.__name__))

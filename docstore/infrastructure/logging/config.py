"""Environment-aware logging setup.

Configuration Logic:
- Development/Local: detailed console output, colored on a terminal, optional file output
- Staging: console output in LOG_FORMAT plus file output when enabled
- Production: JSON console output, WARNING level when optimized
- Testing: null handler at ERROR level to keep test output quiet
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..config.settings import EnvironmentOption, get_settings
from .formatters import get_formatter


def setup_logging_configuration() -> None:
    """Set up the root logger from application settings.

    Should be called once, it replaces any handlers already installed
    on the root logger.
    """
    settings = get_settings()

    if settings.ENVIRONMENT == EnvironmentOption.TESTING:
        configure_testing_logging()
        return

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if settings.ENVIRONMENT == EnvironmentOption.STAGING:
        handlers = _staging_handlers(settings)
    elif settings.ENVIRONMENT == EnvironmentOption.PRODUCTION:
        handlers = _production_handlers(settings)
    else:
        handlers = _development_handlers(settings)

    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(settings.LOG_LEVEL_INT)


def _console_handler(format_type: str, level: int, colored: bool = False) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if colored and sys.platform != "win32" and handler.stream.isatty():
        format_type = "colored"
    handler.setFormatter(get_formatter(format_type))
    handler.setLevel(level)
    return handler


def _file_handlers(settings) -> list[logging.Handler]:
    """Rotating structured file output when LOG_FILE_ENABLED, creating the log directory."""
    if not settings.LOG_FILE_ENABLED:
        return []

    Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.LOG_FILE_PATH,
        maxBytes=settings.LOG_FILE_MAX_SIZE,
        backupCount=settings.LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(get_formatter("structured"))
    handler.setLevel(logging.DEBUG)
    return [handler]


def _development_handlers(settings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if settings.LOG_CONSOLE_ENABLED:
        console_level = logging.DEBUG if settings.LOG_DEVELOPMENT_VERBOSE else settings.LOG_LEVEL_INT
        handlers.append(_console_handler("detailed", console_level, colored=True))

    return handlers + _file_handlers(settings)


def _staging_handlers(settings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if settings.LOG_CONSOLE_ENABLED:
        handlers.append(_console_handler(settings.LOG_FORMAT, settings.LOG_LEVEL_INT))

    return handlers + _file_handlers(settings)


def _production_handlers(settings) -> list[logging.Handler]:
    if not settings.LOG_CONSOLE_ENABLED:
        return []

    console_level = logging.WARNING if settings.LOG_PRODUCTION_OPTIMIZE else settings.LOG_LEVEL_INT
    return [_console_handler("json", console_level)]


def configure_testing_logging() -> None:
    """Configure minimal logging for test runs.

    Can be called from test fixtures to override the normal configuration.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(logging.NullHandler())
    root_logger.setLevel(logging.ERROR)


def reconfigure_logger_level(logger_name: str, level: int) -> None:
    """Change a single logger's level at runtime.

    Args:
        logger_name: Name of the logger to reconfigure
        level: New logging level (logging.DEBUG, INFO, etc.)
    """
    logging.getLogger(logger_name).setLevel(level)

    logging.getLogger(__name__).info(f"Logger level changed: {logger_name} -> {logging.getLevelName(level)}")

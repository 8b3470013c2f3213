"""Logging formatters for the supported output styles.

Available Formatters:
- SimpleFormatter: short console lines
- DetailedFormatter: console lines with timestamps
- ColoredFormatter: detailed lines with a colored level, for terminals
- StructuredFormatter: key=value pairs, readable and greppable
- JSONFormatter: one JSON object per record
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Tuple, Type

RESERVED_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


def _extra_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    """Yield the attributes added to a record through ``extra``."""
    for key, value in record.__dict__.items():
        if key not in RESERVED_RECORD_ATTRS:
            yield key, value


class SimpleFormatter(logging.Formatter):
    """Simple formatter for basic console output.

    Format: [LEVEL] module_name: message
    Example: [INFO] docstore.infrastructure.storage.memory: Document store cleared
    """

    def __init__(self):
        super().__init__(fmt="[%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")


class DetailedFormatter(logging.Formatter):
    """Detailed formatter with timestamp.

    Format: YYYY-MM-DD HH:MM:SS [LEVEL] module_name: message
    """

    def __init__(self):
        super().__init__(fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


class ColoredFormatter(DetailedFormatter):
    """Detailed formatter that colors the level name for terminal output."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return line
        level = f"{record.levelname:>8}"
        return line.replace(f"[{level}]", f"[{color}{level}{self.RESET}]", 1)


class StructuredFormatter(logging.Formatter):
    """Structured formatter with key-value pairs.

    Format: timestamp=... level=LEVEL module=name message="text" key1=value1
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).isoformat()
        parts = [
            f"timestamp={timestamp}",
            f"level={record.levelname}",
            f"module={record.name}",
            f'message="{record.getMessage()}"',
        ]

        for key, value in _extra_fields(record):
            if isinstance(value, (int, float, bool)):
                parts.append(f"{key}={value}")
            else:
                parts.append(f'{key}="{value}"')

        if record.exc_info:
            exc_text = self.formatException(record.exc_info).replace("\n", "\\n")
            parts.append(f'exception="{exc_text}"')

        return " ".join(parts)


class JSONFormatter(logging.Formatter):
    """JSON formatter for log aggregation systems."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
            "filename": record.filename,
            "function": record.funcName,
            "line_number": record.lineno,
        }

        for key, value in _extra_fields(record):
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = str(value)

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_data, ensure_ascii=False)


def get_formatter(format_type: str) -> logging.Formatter:
    """Get the formatter registered under ``format_type``.

    Args:
        format_type: One of "simple", "detailed", "colored", "structured", "json"

    Returns:
        Configured formatter instance

    Raises:
        ValueError: If format_type is not recognized
    """
    formatters: dict[str, Type[logging.Formatter]] = {
        "simple": SimpleFormatter,
        "detailed": DetailedFormatter,
        "colored": ColoredFormatter,
        "structured": StructuredFormatter,
        "json": JSONFormatter,
    }

    formatter_class = formatters.get(format_type.lower())
    if formatter_class is None:
        raise ValueError(f"Unknown format type: {format_type}. Available: {', '.join(formatters.keys())}")

    return formatter_class()

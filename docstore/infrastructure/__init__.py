"""Infrastructure module for the application."""

from .config import get_settings
from .logging import get_logger

__all__ = [
    "get_logger",
    "get_settings",
]

"""Centralized logging infrastructure for docstore.

Usage:
    ```python
    from docstore.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Document inserted", extra={"document_id": document.id})
    ```
"""

from .config import configure_testing_logging, setup_logging_configuration
from .factory import configure_logging, get_logger

__all__ = [
    "get_logger",
    "configure_logging",
    "configure_testing_logging",
    "setup_logging_configuration",
]

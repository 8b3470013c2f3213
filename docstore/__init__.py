"""In-memory document repository with upsert, id lookup and filtered search."""

from .infrastructure.config import get_settings
from .infrastructure.logging import get_logger
from .infrastructure.storage import (
    DocumentRepository,
    InMemoryDocumentStore,
    StoreStats,
    SynchronizedDocumentStore,
    create_document_store,
)
from .modules.common.exceptions import DomainError, ValidationError
from .modules.document import Author, Document
from .modules.search import SearchRequest, matches

__all__ = [
    "Author",
    "Document",
    "SearchRequest",
    "DocumentRepository",
    "InMemoryDocumentStore",
    "SynchronizedDocumentStore",
    "StoreStats",
    "create_document_store",
    "matches",
    "DomainError",
    "ValidationError",
    "get_settings",
    "get_logger",
]

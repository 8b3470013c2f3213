"""Document storage for docstore."""

from .base import DocumentRepository, StoreStats
from .factory import create_document_store
from .memory import InMemoryDocumentStore
from .synchronized import SynchronizedDocumentStore

__all__ = [
    "DocumentRepository",
    "StoreStats",
    "InMemoryDocumentStore",
    "SynchronizedDocumentStore",
    "create_document_store",
]

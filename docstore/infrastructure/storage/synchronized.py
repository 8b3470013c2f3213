"""Lock-guarded wrapper for sharing a document store between threads."""

import threading
from typing import List, Optional

from ...modules.document.schemas import Document
from ...modules.search.schemas import SearchRequest
from .base import DocumentRepository, StoreStats


class SynchronizedDocumentStore(DocumentRepository):
    """Serializes every operation on a wrapped store with one lock.

    Semantics of the wrapped store are unchanged.
    """

    def __init__(self, store: DocumentRepository):
        self._store = store
        self._lock = threading.Lock()

    @property
    def store(self) -> DocumentRepository:
        return self._store

    def save(self, document: Document) -> Document:
        with self._lock:
            return self._store.save(document)

    def find_by_id(self, document_id: Optional[str]) -> Optional[Document]:
        with self._lock:
            return self._store.find_by_id(document_id)

    def search(self, request: SearchRequest) -> List[Document]:
        with self._lock:
            return self._store.search(request)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def get_stats(self) -> StoreStats:
        with self._lock:
            return self._store.get_stats()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, document_id: object) -> bool:
        with self._lock:
            return document_id in self._store

"""In-memory document store."""

import uuid
from typing import Dict, List, Optional

from ...modules.common.exceptions import ValidationError
from ...modules.common.timestamps import utc_now
from ...modules.document.schemas import Document
from ...modules.search.evaluator import matches
from ...modules.search.schemas import SearchRequest
from ..config.settings import get_settings
from ..logging import get_logger
from .base import DocumentRepository, StoreStats

logger = get_logger(__name__)


class InMemoryDocumentStore(DocumentRepository):
    """Document store backed by a single insertion-ordered dict.

    The dict doubles as the id index: lookups are O(1) and assigning to an
    existing key keeps its position, so updates never reorder documents.
    Search is a full scan applying ``matches`` to each document.

    Not safe for concurrent use. Wrap it in ``SynchronizedDocumentStore``
    when several threads share one instance.
    """

    def __init__(self):
        self._documents: Dict[str, Document] = {}
        self._last_updated: Optional[str] = None
        self._log_searches = get_settings().DOCUMENT_STORE_LOG_SEARCHES

    def save(self, document: Document) -> Document:
        if document is None:
            raise ValidationError("Document to save must not be None")

        if document.created is None:
            document.created = utc_now()

        if document.id is not None and document.id in self._documents:
            self._documents[document.id] = document
            logger.debug("Document updated", extra={"document_id": document.id})
        else:
            document.id = str(uuid.uuid4())
            self._documents[document.id] = document
            logger.debug("Document inserted", extra={"document_id": document.id})

        self._last_updated = utc_now().isoformat()
        return document

    def find_by_id(self, document_id: Optional[str]) -> Optional[Document]:
        if document_id is None:
            return None
        return self._documents.get(document_id)

    def search(self, request: SearchRequest) -> List[Document]:
        if request is None:
            raise ValidationError("Search request must not be None")

        results = [document for document in self._documents.values() if matches(request, document)]

        if self._log_searches:
            logger.debug(
                "Search completed",
                extra={"scanned": len(self._documents), "matched": len(results)},
            )

        return results

    def clear(self) -> None:
        self._documents.clear()
        self._last_updated = utc_now().isoformat()
        logger.info("Document store cleared")

    def get_stats(self) -> StoreStats:
        return StoreStats(total_documents=len(self._documents), last_updated=self._last_updated)

    def __len__(self) -> int:
        return len(self._documents)

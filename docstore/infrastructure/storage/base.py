"""Abstract base class for document repositories."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from ...modules.document.schemas import Document
from ...modules.search.schemas import SearchRequest


@dataclass
class StoreStats:
    """Statistics about a document store."""

    total_documents: int
    last_updated: Optional[str] = None


class DocumentRepository(ABC):
    """Interface shared by every document store implementation.

    Implementations hold documents keyed by id, upsert them, look them up by id
    and return the documents matching a search request in insertion order.
    """

    @abstractmethod
    def save(self, document: Document) -> Document:
        """Insert or update a document.

        A document whose id is already stored replaces the stored one in place.
        Any other document, including one with no id, gets a newly generated id
        and is appended. ``created`` is set to the current time when missing.

        Args:
            document: The document to save

        Returns:
            The saved document with ``id`` and ``created`` populated
        """
        pass

    @abstractmethod
    def find_by_id(self, document_id: Optional[str]) -> Optional[Document]:
        """Look up a document by id.

        Args:
            document_id: Identifier of the document

        Returns:
            The stored document, or None if no document has that id
        """
        pass

    @abstractmethod
    def search(self, request: SearchRequest) -> List[Document]:
        """Return every stored document matching the request.

        Args:
            request: Search criteria, each field optional

        Returns:
            Matching documents in insertion order
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all documents."""
        pass

    @abstractmethod
    def get_stats(self) -> StoreStats:
        """Get statistics about the store."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, document_id: object) -> bool:
        return isinstance(document_id, str) and self.find_by_id(document_id) is not None

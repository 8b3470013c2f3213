from typing import Optional

from ..config.settings import get_settings
from ..logging import get_logger
from .base import DocumentRepository
from .memory import InMemoryDocumentStore
from .synchronized import SynchronizedDocumentStore

logger = get_logger(__name__)


def create_document_store(thread_safe: Optional[bool] = None) -> DocumentRepository:
    """Create a new empty document store.

    Args:
        thread_safe: Wrap the store in a lock. Defaults to the
            DOCUMENT_STORE_THREAD_SAFE setting.

    Returns:
        A plain or synchronized in-memory store
    """
    if thread_safe is None:
        thread_safe = get_settings().DOCUMENT_STORE_THREAD_SAFE

    store: DocumentRepository = InMemoryDocumentStore()
    if thread_safe:
        store = SynchronizedDocumentStore(store)

    logger.debug("Document store created", extra={"thread_safe": thread_safe})
    return store

"""Test configuration and fixtures for docstore."""

import os
from datetime import datetime, timezone

import pytest

# Must be set before docstore reads its settings.
os.environ["ENVIRONMENT"] = "testing"
os.environ["DOCUMENT_STORE_THREAD_SAFE"] = "false"

from docstore.infrastructure.logging import configure_testing_logging  # noqa: E402
from docstore.infrastructure.storage import InMemoryDocumentStore  # noqa: E402
from docstore.modules.document import Author, Document  # noqa: E402

T1 = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
T2 = datetime(2024, 2, 20, 8, 30, tzinfo=timezone.utc)


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep log output out of test results."""
    configure_testing_logging()


@pytest.fixture
def t1() -> datetime:
    return T1


@pytest.fixture
def t2() -> datetime:
    return T2


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Create an empty in-memory store."""
    return InMemoryDocumentStore()


@pytest.fixture
def author_1() -> Author:
    return Author(id="A1", name="Ada")


@pytest.fixture
def author_2() -> Author:
    return Author(id="A2", name="Grace")


@pytest.fixture
def document_1(author_1: Author) -> Document:
    return Document(title="Hello World", content="abc xyz", author=author_1, created=T1)


@pytest.fixture
def document_2(author_2: Author) -> Document:
    return Document(title="Hello Moon", content="abc", author=author_2, created=T2)


@pytest.fixture
def populated_store(store: InMemoryDocumentStore, document_1: Document, document_2: Document) -> InMemoryDocumentStore:
    """Store holding document_1 then document_2."""
    store.save(document_1)
    store.save(document_2)
    return store

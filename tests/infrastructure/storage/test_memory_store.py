"""Tests for InMemoryDocumentStore."""

import logging
import uuid
from datetime import datetime, timezone

import pytest

from docstore.infrastructure.storage import InMemoryDocumentStore
from docstore.modules.common.exceptions import DomainError, ValidationError
from docstore.modules.document import Author, Document
from docstore.modules.search import SearchRequest


class TestSave:
    """Test suite for upserting documents."""

    def test_save_assigns_id(self, store: InMemoryDocumentStore):
        """Test that a document without id gets a UUID string."""
        saved = store.save(Document(title="Notes"))

        assert saved.id is not None
        assert str(uuid.UUID(saved.id)) == saved.id
        assert len(store) == 1

    def test_save_twice_without_id_creates_two_documents(self, store: InMemoryDocumentStore):
        """Test that id-less saves never reuse an id."""
        first = store.save(Document(title="Same"))
        second = store.save(Document(title="Same"))

        assert first.id != second.id
        assert len(store) == 2

    def test_save_sets_created_when_missing(self, store: InMemoryDocumentStore):
        """Test that created defaults to the time of the call."""
        before = datetime.now(timezone.utc)

        saved = store.save(Document(title="Fresh"))

        assert saved.created is not None
        assert saved.created >= before

    def test_save_keeps_supplied_created(self, store: InMemoryDocumentStore, t1: datetime):
        """Test that an existing created timestamp is not overwritten."""
        saved = store.save(Document(title="Old", created=t1))

        assert saved.created == t1

    def test_update_keeps_id_and_created(self, store: InMemoryDocumentStore, t1: datetime):
        """Test that saving with a known id replaces the stored document."""
        original = store.save(Document(title="Draft", content="v1", created=t1))

        updated = store.save(Document(id=original.id, title="Final", content="v2", created=t1))

        assert updated.id == original.id
        assert updated.created == t1
        assert len(store) == 1
        assert store.find_by_id(original.id).content == "v2"

    def test_update_preserves_position(self, store: InMemoryDocumentStore):
        """Test that updating a document does not move it to the end."""
        first = store.save(Document(title="first"))
        store.save(Document(title="second"))
        store.save(Document(title="third"))

        store.save(Document(id=first.id, title="first, revised", created=first.created))

        titles = [doc.title for doc in store.search(SearchRequest())]
        assert titles == ["first, revised", "second", "third"]

    def test_save_with_unknown_id_generates_new_id(self, store: InMemoryDocumentStore):
        """Test that an id not present in the store is replaced by a generated one."""
        saved = store.save(Document(id="caller-chosen", title="Orphan"))

        assert saved.id != "caller-chosen"
        assert store.find_by_id("caller-chosen") is None
        assert store.find_by_id(saved.id) is saved

    def test_save_with_empty_id_generates_new_id(self, store: InMemoryDocumentStore):
        """Test that an empty-string id is treated as new."""
        saved = store.save(Document(id="", title="Blank id"))

        assert saved.id
        assert len(store) == 1

    def test_save_returns_same_object(self, store: InMemoryDocumentStore):
        """Test that save populates and returns the given document."""
        document = Document(title="Mine")

        saved = store.save(document)

        assert saved is document
        assert document.id is not None

    def test_save_none_raises(self, store: InMemoryDocumentStore):
        """Test that saving None is rejected at the boundary."""
        with pytest.raises(ValidationError):
            store.save(None)  # type: ignore[arg-type]

        assert issubclass(ValidationError, DomainError)


class TestFindById:
    """Test suite for id lookup."""

    def test_find_saved_document(self, store: InMemoryDocumentStore, document_1: Document):
        """Test that a saved document is returned deep-equal."""
        saved = store.save(document_1)

        found = store.find_by_id(saved.id)

        assert found == saved
        assert found.author == Author(id="A1", name="Ada")

    def test_find_missing_document(self, populated_store: InMemoryDocumentStore):
        """Test that an unknown id returns None."""
        assert populated_store.find_by_id("nonexistent") is None

    def test_find_none_id(self, populated_store: InMemoryDocumentStore):
        """Test that a None id is a miss, not an error."""
        assert populated_store.find_by_id(None) is None

    def test_contains(self, populated_store: InMemoryDocumentStore, document_1: Document):
        """Test id membership checks."""
        assert document_1.id in populated_store
        assert "nonexistent" not in populated_store
        assert 42 not in populated_store


class TestSearch:
    """Test suite for store search."""

    def test_empty_request_returns_all_in_insertion_order(
        self, populated_store: InMemoryDocumentStore, document_1: Document, document_2: Document
    ):
        """Test that a request without criteria matches everything."""
        results = populated_store.search(SearchRequest())

        assert results == [document_1, document_2]

    def test_search_empty_store(self, store: InMemoryDocumentStore):
        """Test search on an empty store."""
        assert store.search(SearchRequest(title_prefixes=["Hello"])) == []

    def test_search_conjunction(self, populated_store: InMemoryDocumentStore, document_1: Document):
        """Test that title and content criteria combine with AND."""
        request = SearchRequest(title_prefixes=["Hello"], contains_contents=["abc", "xyz"])

        assert populated_store.search(request) == [document_1]

    def test_search_date_bounds_inclusive(
        self, populated_store: InMemoryDocumentStore, document_1: Document, t1: datetime
    ):
        """Test that both date bounds include equality."""
        request = SearchRequest(created_from=t1, created_to=t1)

        assert populated_store.search(request) == [document_1]

    def test_search_author_ids_are_and_combined(self, populated_store: InMemoryDocumentStore):
        """Test that two different author ids never match a single-author document."""
        request = SearchRequest(author_ids=["A1", "A2"])

        assert populated_store.search(request) == []

    def test_search_single_author(self, populated_store: InMemoryDocumentStore, document_2: Document):
        """Test filtering on one author id."""
        assert populated_store.search(SearchRequest(author_ids=["A2"])) == [document_2]

    def test_search_no_match(self, populated_store: InMemoryDocumentStore):
        """Test that a request nothing satisfies returns an empty list."""
        assert populated_store.search(SearchRequest(title_prefixes=["Goodbye"])) == []

    def test_search_does_not_modify_store(self, populated_store: InMemoryDocumentStore):
        """Test that search has no side effects."""
        populated_store.search(SearchRequest(contains_contents=["xyz"]))

        assert len(populated_store) == 2

    def test_search_after_assigning_naive_created(self, store: InMemoryDocumentStore):
        """Test that a naive created set by assignment compares against aware bounds."""
        document = Document(title="t")
        document.created = datetime(2024, 1, 10, 12, 0)
        store.save(document)

        request = SearchRequest(created_from=datetime(2024, 1, 1, tzinfo=timezone.utc))

        assert store.search(request) == [document]

    def test_search_none_raises(self, store: InMemoryDocumentStore):
        """Test that a None request is rejected at the boundary."""
        with pytest.raises(ValidationError):
            store.search(None)  # type: ignore[arg-type]


class TestStoreMaintenance:
    """Test suite for clear and statistics."""

    def test_stats_empty(self, store: InMemoryDocumentStore):
        """Test statistics of a new store."""
        stats = store.get_stats()

        assert stats.total_documents == 0
        assert stats.last_updated is None

    def test_stats_after_save(self, populated_store: InMemoryDocumentStore):
        """Test statistics after saving documents."""
        stats = populated_store.get_stats()

        assert stats.total_documents == 2
        assert stats.last_updated is not None

    def test_clear(self, populated_store: InMemoryDocumentStore, document_1: Document):
        """Test that clear drops every document."""
        populated_store.clear()

        assert len(populated_store) == 0
        assert populated_store.find_by_id(document_1.id) is None
        assert populated_store.search(SearchRequest()) == []


class TestStoreLogging:
    """Test suite for store log output."""

    def test_insert_and_update_are_logged(self, store: InMemoryDocumentStore, caplog: pytest.LogCaptureFixture):
        """Test that inserts and updates emit debug records with the document id."""
        caplog.set_level(logging.DEBUG, logger="docstore.infrastructure.storage.memory")

        saved = store.save(Document(title="Logged"))
        store.save(Document(id=saved.id, title="Logged again", created=saved.created))

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Document inserted", "Document updated"]
        assert all(getattr(record, "document_id") == saved.id for record in caplog.records)

    def test_search_is_logged(self, populated_store: InMemoryDocumentStore, caplog: pytest.LogCaptureFixture):
        """Test that searches report scanned and matched counts."""
        caplog.set_level(logging.DEBUG, logger="docstore.infrastructure.storage.memory")

        populated_store.search(SearchRequest(contains_contents=["xyz"]))

        record = caplog.records[-1]
        assert record.getMessage() == "Search completed"
        assert getattr(record, "scanned") == 2
        assert getattr(record, "matched") == 1

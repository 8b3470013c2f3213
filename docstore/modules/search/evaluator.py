"""Predicate deciding whether a single document satisfies a search request."""

from ..document.schemas import Document
from .schemas import SearchRequest


def matches(request: SearchRequest, document: Document) -> bool:
    """Check a document against every criterion of a request.

    Criteria combine with AND. Within a field, title prefixes combine with OR
    while content fragments and author ids combine with AND. A document
    missing the field an active criterion reads does not match it.

    Args:
        request: Search criteria
        document: Stored document to test

    Returns:
        True if the document satisfies all active criteria
    """
    return (
        _matches_title(request, document)
        and _matches_content(request, document)
        and _matches_author(request, document)
        and _matches_created(request, document)
    )


def _matches_title(request: SearchRequest, document: Document) -> bool:
    if not request.title_prefixes:
        return True
    if document.title is None:
        return False
    return any(document.title.startswith(prefix) for prefix in request.title_prefixes)


def _matches_content(request: SearchRequest, document: Document) -> bool:
    if not request.contains_contents:
        return True
    if document.content is None:
        return False
    return all(fragment in document.content for fragment in request.contains_contents)


def _matches_author(request: SearchRequest, document: Document) -> bool:
    # AND across the list: two distinct ids can never both equal one author id.
    # Kept as-is pending product confirmation that OR was not intended.
    if not request.author_ids:
        return True
    author_id = document.author.id if document.author is not None else None
    return all(author_id == expected for expected in request.author_ids)


def _matches_created(request: SearchRequest, document: Document) -> bool:
    if request.created_from is None and request.created_to is None:
        return True
    if document.created is None:
        return False
    if request.created_from is not None and document.created < request.created_from:
        return False
    if request.created_to is not None and document.created > request.created_to:
        return False
    return True

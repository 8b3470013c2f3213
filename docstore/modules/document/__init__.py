"""Document and author schemas."""

from .schemas import Author, Document

__all__ = [
    "Author",
    "Document",
]

"""Search request schema and document matching."""

from .evaluator import matches
from .schemas import SearchRequest

__all__ = [
    "SearchRequest",
    "matches",
]

"""Pydantic schemas for search requests."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.timestamps import ensure_utc


class SearchRequest(BaseModel):
    """Search criteria, each one optional.

    Criteria are combined with AND. A missing or empty list imposes no
    constraint, and both date bounds are inclusive.
    """

    model_config = ConfigDict(validate_assignment=True)

    title_prefixes: Optional[List[str]] = Field(default=None, description="Title must start with any of these")
    contains_contents: Optional[List[str]] = Field(default=None, description="Content must contain all of these")
    author_ids: Optional[List[str]] = Field(default=None, description="Author id must equal all of these")
    created_from: Optional[datetime] = Field(default=None, description="Inclusive lower bound on created")
    created_to: Optional[datetime] = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_are_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

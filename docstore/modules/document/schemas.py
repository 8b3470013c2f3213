"""Pydantic schemas for stored documents."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.timestamps import ensure_utc


class Author(BaseModel):
    """Author embedded by value in a document."""

    id: Optional[str] = Field(default=None, description="Opaque author identifier")
    name: Optional[str] = None


class Document(BaseModel):
    """The unit of storage.

    ``id`` is generated by the store when missing or unknown, and ``created``
    is filled in on first save. Both are left alone once set.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = Field(default=None, description="Unique document identifier")
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = Field(default=None, description="Creation time, set once at first save")

    @field_validator("created")
    @classmethod
    def created_is_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

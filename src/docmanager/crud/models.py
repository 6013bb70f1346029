"""Document, author, and search request models"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes so stored and requested timestamps always compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class EmptyFilter(str, Enum):
    """How a non-None but empty filter list is evaluated"""
    match_none = "match-none"   # OR over zero options is false
    ignore = "ignore"           # treated the same as None


class Author(BaseModel):
    id: str
    name: str


class Document(BaseModel):
    """A stored record; id and created are assigned by the repository on save."""
    id: Optional[str] = None
    title: str
    content: str
    author: Author
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def _utc_created(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Optional filters: AND across fields, OR within a list. None skips the filter."""
    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None     # inclusive
    created_to:        Optional[datetime] = None     # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def _utc_bounds(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)

"""In-memory document repository with upsert, lookup, and filtered search"""

from docmanager.crud.memory_repo import DocumentManager, MemoryRepo
from docmanager.crud.models import Author, Document, EmptyFilter, SearchRequest
from docmanager.crud.repo import DocumentRepo

__all__ = [
    "Author", "Document", "DocumentManager", "DocumentRepo",
    "EmptyFilter", "MemoryRepo", "SearchRequest",
]

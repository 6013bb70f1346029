import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from docmanager.crud.filters import matches
from docmanager.crud.models import Document, EmptyFilter, SearchRequest, as_utc
from docmanager.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MemoryRepo(DocumentRepo):
    """Dict-backed document store owned by the caller; not thread-safe."""
    empty_filter: EmptyFilter = EmptyFilter.match_none
    clock: Callable[[], datetime] = utcnow
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, doc: Document) -> Document:
        if not doc.id:
            doc.id = str(uuid4())
        existing = self._docs.get(doc.id)
        if existing is not None:
            doc.created = existing.created
            logger.debug("updated document %s", doc.id)
        else:
            doc.created = as_utc(self.clock())
            logger.debug("created document %s", doc.id)
        self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        found = [d for d in self._docs.values() if matches(d, request, self.empty_filter)]
        logger.debug("search matched %d of %d documents", len(found), len(self._docs))
        return found

    def __len__(self) -> int:
        return len(self._docs)


DocumentManager = MemoryRepo

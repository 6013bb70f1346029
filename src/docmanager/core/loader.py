"""Seed file loading: YAML document fixtures into an in-memory repository"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docmanager.crud.models import Document
from docmanager.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def load_documents(path: str | Path) -> list[Document]:
    """Read a YAML list of documents, or a mapping with a 'documents' list.

    Raises ValueError for unreadable files, invalid YAML, or invalid document fields.
    """
    path = Path(path)
    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    if raw is None:
        return []
    if isinstance(raw, dict):
        if "documents" not in raw:
            raise ValueError(f"Invalid {path}: expected a list of documents")
        raw = raw["documents"] or []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    try:
        docs = [Document.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e
    logger.info("loaded %d document(s) from %s", len(docs), path)
    return docs


def seed_repo(repo: DocumentRepo, docs: list[Document]) -> list[Document]:
    """Save each document into repo in order and return the saved documents."""
    return [repo.save(d) for d in docs]

"""CLI command implementations"""

import json
from datetime import datetime
from enum import Enum
from typing import Annotated, List, Optional

import typer

from docmanager.config import Settings, configure_logging, load_config
from docmanager.core.loader import load_documents, seed_repo
from docmanager.crud.memory_repo import MemoryRepo
from docmanager.crud.models import Document, EmptyFilter, SearchRequest


class ListFilter(str, Enum):
    """SearchRequest list fields that --empty can send as []"""
    title_prefixes = "title-prefixes"
    contains_contents = "contains-contents"
    author_ids = "author-ids"


ConfigOption = Annotated[Optional[str], typer.Option("--config", help="Settings file (default: ./config.yaml if present)")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(config: str | None, overrides: dict = None) -> Settings:
    """Resolve settings and apply the configured log level."""
    try:
        settings = load_config(overrides=overrides, config_file=config)
    except ValueError as e:
        _fail("Bad configuration", e)
    configure_logging(settings.log_level)
    return settings


def _repo(seed: str, settings: Settings) -> MemoryRepo:
    """Fresh in-memory repository populated from the seed file."""
    repo = MemoryRepo(empty_filter=EmptyFilter(settings.empty_filter))
    try:
        seed_repo(repo, load_documents(seed))
    except ValueError as e:
        _fail(str(e))
    return repo


def _list_filter(values: list[str] | None, field: ListFilter, empty: list[ListFilter]) -> list[str] | None:
    """Values given on the command line, [] when the field was passed to --empty, else None."""
    if field in empty:
        if values:
            _fail(f"--empty {field.value} conflicts with values given for the same filter")
        return []
    return values or None


def _dump(doc: Document) -> dict:
    return doc.model_dump(mode="json")


def search_cmd(
    seed: Annotated[str, typer.Argument(help="YAML file of documents to load")],
    title_prefix: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[List[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[List[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Inclusive lower bound")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Inclusive upper bound")] = None,
    empty: Annotated[Optional[List[ListFilter]], typer.Option("--empty", help="Send this list filter as [] (repeatable)")] = None,
    empty_filter: Annotated[Optional[str], typer.Option("--empty-filter", help="How [] filters match: match-none or ignore")] = None,
    config: ConfigOption = None,
    ):
    """Load SEED and print documents matching the filters as a JSON array."""
    settings = _settings(config, overrides={"empty_filter": empty_filter})
    repo = _repo(seed, settings)
    empty = empty or []
    request = SearchRequest(
        title_prefixes=_list_filter(title_prefix, ListFilter.title_prefixes, empty),
        contains_contents=_list_filter(contains, ListFilter.contains_contents, empty),
        author_ids=_list_filter(author, ListFilter.author_ids, empty),
        created_from=created_from,
        created_to=created_to,
    )
    found = repo.search(request)
    typer.echo(json.dumps([_dump(d) for d in found], indent=2, ensure_ascii=False))


def show_cmd(
    seed: Annotated[str, typer.Argument(help="YAML file of documents to load")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    config: ConfigOption = None,
    ):
    """Load SEED and print a single document by id."""
    repo = _repo(seed, _settings(config))
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(json.dumps(_dump(doc), indent=2, ensure_ascii=False))

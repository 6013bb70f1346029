"""Search predicates: one pure check per SearchRequest field, combined with AND"""

from typing import Callable, Iterable

from docmanager.crud.models import Document, EmptyFilter, SearchRequest


def _any_of(options: Iterable[str], test: Callable[[str], bool], empty: EmptyFilter) -> bool:
    """OR over options; an empty list either fails or passes depending on the policy."""
    options = list(options)
    if not options:
        return empty == EmptyFilter.ignore
    return any(test(o) for o in options)


def match_title(doc: Document, prefixes: list[str] | None, empty: EmptyFilter = EmptyFilter.match_none) -> bool:
    """Title starts with at least one prefix."""
    if prefixes is None:
        return True
    return _any_of(prefixes, doc.title.startswith, empty)


def match_content(doc: Document, needles: list[str] | None, empty: EmptyFilter = EmptyFilter.match_none) -> bool:
    """Content contains at least one substring."""
    if needles is None:
        return True
    return _any_of(needles, lambda n: n in doc.content, empty)


def match_author(doc: Document, author_ids: list[str] | None, empty: EmptyFilter = EmptyFilter.match_none) -> bool:
    """Author id is a member of the given ids."""
    if author_ids is None:
        return True
    return _any_of(author_ids, lambda a: a == doc.author.id, empty)


def match_created(doc: Document, created_from=None, created_to=None) -> bool:
    """Created falls within the inclusive [created_from, created_to] range."""
    if created_from is not None and doc.created < created_from:
        return False
    if created_to is not None and doc.created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest | None, empty: EmptyFilter = EmptyFilter.match_none) -> bool:
    """Return True when doc satisfies every non-None filter in request.

    A None request matches every document.
    """
    if request is None:
        return True
    return (
        match_title(doc, request.title_prefixes, empty)
        and match_content(doc, request.contains_contents, empty)
        and match_author(doc, request.author_ids, empty)
        and match_created(doc, request.created_from, request.created_to)
    )

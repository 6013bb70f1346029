"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone

import pytest

from docmanager.crud.memory_repo import MemoryRepo
from docmanager.crud.models import Author, Document


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: returns T0, T0 + 1h, T0 + 2h, ... on successive calls."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(hours=1)):
        self.start = start
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current += self.step
        return now


def _make_doc(title: str = "Hello world", content: str = "foo bar", author_id: str = "a1", **kwargs) -> Document:
    """Build an unsaved Document with a minimal author."""
    return Document(title=title, content=content, author=Author(id=author_id, name=f"Author {author_id}"), **kwargs)


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    return _make_doc


@pytest.fixture(name="clock")
def clock_fixture():
    return StepClock()


@pytest.fixture(name="repo")
def repo_fixture(clock):
    """Empty repository stamping created times from the step clock."""
    return MemoryRepo(clock=clock)


@pytest.fixture(name="corpus")
def corpus_fixture(repo):
    """Four saved documents created at T0, T0+1h, T0+2h, T0+3h."""
    docs = [
        _make_doc(title="Hello world", content="foo and bar", author_id="a1"),
        _make_doc(title="Hi there", content="just foo", author_id="a2"),
        _make_doc(title="Hello again", content="nothing here", author_id="a1"),
        _make_doc(title="Goodbye", content="bar only", author_id="a3"),
    ]
    return [repo.save(d) for d in docs]

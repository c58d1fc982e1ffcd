"""Pytest fixtures for DocStore tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from docstore.domain.entities import Author, Document
from docstore.infrastructure.persistence.memory import DocumentManager


@pytest.fixture
def manager() -> DocumentManager:
    """Fresh in-memory store for each test."""
    return DocumentManager()


@pytest.fixture
def t1() -> datetime:
    return datetime(2024, 1, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def t2(t1: datetime) -> datetime:
    return t1 + timedelta(days=5)


@pytest.fixture
def doc_a(t1: datetime) -> Document:
    """Unsaved document by author a1, created at t1."""
    return Document(
        title="Hello World",
        content="the quick brown fox",
        author=Author(id="a1", name="Alice"),
        created=t1,
    )


@pytest.fixture
def doc_b(t2: datetime) -> Document:
    """Unsaved document by author a2, created at t2."""
    return Document(
        title="Goodbye",
        content="jumps over the lazy dog",
        author=Author(id="a2", name="Bob"),
        created=t2,
    )


def ids(documents: list[Document]) -> set[str | None]:
    """Result ids as a set - search order is not part of the contract."""
    return {d.id for d in documents}

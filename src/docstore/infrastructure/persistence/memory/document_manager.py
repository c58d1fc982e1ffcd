"""In-memory document store."""

import logging
from collections.abc import Callable

from docstore.domain.entities import Document
from docstore.domain.value_objects import SearchRequest

logger = logging.getLogger(__name__)


class DocumentManager:
    """Holds documents keyed by id, assigns ids to new documents and answers
    point lookups and linear-scan searches.

    Every document entering or leaving ``storage`` is a fresh copy, so callers
    never share references with stored state. Not safe for concurrent use;
    serialize access externally if needed.
    """

    def __init__(self, start_id: int = 1) -> None:
        self.storage: dict[str, Document] = {}
        self._next_id = start_id

    def save(self, document: Document) -> Document:
        """Upsert a copy of ``document``.

        A document without id gets the next counter value, and the id is also
        set on the caller's object. ``created`` is never touched.
        """
        if document.id is None:
            stored = document.copy()
            stored.id = self._generate_id()
            self.storage[stored.id] = stored
            document.id = stored.id
            logger.debug("Assigned id %s to new document", stored.id)
        else:
            if document.id in self.storage:
                logger.debug("Overwriting document %s", document.id)
            self.storage[document.id] = document.copy()
        return document

    def find_by_id(self, document_id: str) -> Document | None:
        stored = self.storage.get(document_id)
        return stored.copy() if stored is not None else None

    def search(self, request: SearchRequest) -> list[Document]:
        """Copies of every stored document matching all constrained dimensions."""
        matched = [doc.copy() for doc in self.storage.values() if _matches(doc, request)]
        logger.debug(
            "Search matched %d of %d documents (unfiltered: %s)",
            len(matched),
            len(self.storage),
            request.is_empty(),
        )
        return matched

    def _generate_id(self) -> str:
        value = self._next_id
        self._next_id += 1
        return str(value)


def _matches(doc: Document, req: SearchRequest) -> bool:
    checks: list[Callable[[Document, SearchRequest], bool]] = [
        _matches_title_prefixes,
        _matches_contains_contents,
        _matches_author_ids,
        _matches_created_from,
        _matches_created_to,
    ]
    return all(check(doc, req) for check in checks)


# A field that is None on the document never satisfies an active constraint.


def _matches_title_prefixes(doc: Document, req: SearchRequest) -> bool:
    if req.title_prefixes is None:
        return True
    if doc.title is None:
        return False
    return any(doc.title.startswith(prefix) for prefix in req.title_prefixes)


def _matches_contains_contents(doc: Document, req: SearchRequest) -> bool:
    if req.contains_contents is None:
        return True
    if doc.content is None:
        return False
    return any(part in doc.content for part in req.contains_contents)


def _matches_author_ids(doc: Document, req: SearchRequest) -> bool:
    if req.author_ids is None:
        return True
    if doc.author is None:
        return False
    return doc.author.id in req.author_ids


def _matches_created_from(doc: Document, req: SearchRequest) -> bool:
    if req.created_from is None:
        return True
    return doc.created is not None and doc.created >= req.created_from


def _matches_created_to(doc: Document, req: SearchRequest) -> bool:
    if req.created_to is None:
        return True
    return doc.created is not None and doc.created <= req.created_to

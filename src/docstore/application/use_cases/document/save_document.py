"""Save document use case."""

import logging

from docstore.application.ports import DocumentRepository
from docstore.domain.entities import Document

logger = logging.getLogger(__name__)


class SaveDocumentUseCase:
    """Upsert a document, assigning an id when it has none."""

    def __init__(self, documents: DocumentRepository) -> None:
        self._documents = documents

    def execute(self, document: Document) -> Document:
        """Save document. The returned object carries the resolved id."""
        saved = self._documents.save(document)
        logger.info("Saved document %s", saved.id)
        return saved

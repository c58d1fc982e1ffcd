"""Get document use case."""

from docstore.application.ports import DocumentRepository
from docstore.domain.entities import Document
from docstore.domain.exceptions import NotFound


class GetDocumentUseCase:
    """Get document by id."""

    def __init__(self, documents: DocumentRepository) -> None:
        self._documents = documents

    def execute(self, document_id: str) -> Document:
        document = self._documents.find_by_id(document_id)
        if document is None:
            raise NotFound("Document", document_id)
        return document

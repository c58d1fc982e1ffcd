"""Search documents use case - title prefix, content, author and date filters."""

from docstore.application.ports import DocumentRepository
from docstore.domain.entities import Document
from docstore.domain.value_objects import SearchRequest


class SearchDocumentsUseCase:
    """Return every stored document matching the request."""

    def __init__(self, documents: DocumentRepository) -> None:
        self._documents = documents

    def execute(self, request: SearchRequest) -> list[Document]:
        return self._documents.search(request)

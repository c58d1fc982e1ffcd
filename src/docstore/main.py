"""Application entry point and composition root."""

import logging

from docstore import __version__
from docstore.application.use_cases.document.get_document import GetDocumentUseCase
from docstore.application.use_cases.document.save_document import SaveDocumentUseCase
from docstore.application.use_cases.search.search_documents import SearchDocumentsUseCase
from docstore.config import Settings, get_settings, setup_logging
from docstore.infrastructure.persistence.memory import DocumentManager
from docstore.interfaces.api.app import create_app
from docstore.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docstore.interfaces.api.resources.health import HealthResource
from docstore.interfaces.api.resources.search import SearchResource

logger = logging.getLogger(__name__)


def create_docstore_app(settings: Settings | None = None):
    """Composition root - build Falcon app around a single DocumentManager."""
    settings = settings or get_settings()
    documents = DocumentManager(start_id=settings.id_start)

    save_document = SaveDocumentUseCase(documents)
    get_document = GetDocumentUseCase(documents)
    search_documents = SearchDocumentsUseCase(documents)

    return create_app(
        documents_resource=DocumentsResource(save_document),
        document_resource=DocumentResource(get_document, save_document),
        search_resource=SearchResource(search_documents),
        health_resource=HealthResource(),
    )


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("DocStore v%s (%s)", __version__, settings.environment)

    app = create_docstore_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

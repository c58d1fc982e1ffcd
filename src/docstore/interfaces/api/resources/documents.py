"""Document API resources."""

import falcon.asgi

from docstore.application.use_cases.document.get_document import GetDocumentUseCase
from docstore.application.use_cases.document.save_document import SaveDocumentUseCase
from docstore.domain.exceptions import NotFound, ValidationError
from docstore.interfaces.api.resources.serialization import (
    document_from_media,
    document_to_dict,
)


class DocumentsResource:
    """POST /v1/documents - save document, assigning an id when the body has none."""

    def __init__(self, save_document: SaveDocumentUseCase) -> None:
        self._save_document = save_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create or overwrite a document. 201 when a new id was assigned."""
        try:
            body = await req.get_media()
            document = document_from_media(body)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        assigned = document.id is None
        result = self._save_document.execute(document)
        resp.media = document_to_dict(result)
        resp.status = falcon.HTTP_201 if assigned else falcon.HTTP_200


class DocumentResource:
    """GET/PUT /v1/documents/{id} - get or upsert a document by id."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        save_document: SaveDocumentUseCase,
    ) -> None:
        self._get_document = get_document
        self._save_document = save_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Get document by id."""
        try:
            result = self._get_document.execute(document_id)
            resp.media = document_to_dict(result)
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Overwrite (or create) the document stored under the path id."""
        try:
            body = await req.get_media()
            document = document_from_media(body, document_id=document_id)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        result = self._save_document.execute(document)
        resp.media = document_to_dict(result)
        resp.status = falcon.HTTP_200

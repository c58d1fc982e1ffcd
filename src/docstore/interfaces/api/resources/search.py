"""Search API resource."""

import falcon.asgi

from docstore.application.use_cases.search.search_documents import SearchDocumentsUseCase
from docstore.domain.exceptions import ValidationError
from docstore.interfaces.api.resources.serialization import (
    document_to_dict,
    search_request_from_media,
)


class SearchResource:
    """POST /v1/search - filter documents by title prefix, content, author and date."""

    def __init__(self, search_documents: SearchDocumentsUseCase) -> None:
        self._search_documents = search_documents

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Execute search. An empty body matches every document."""
        try:
            body = await req.get_media(default_when_empty=None)
            request = search_request_from_media(body)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        results = self._search_documents.execute(request)
        resp.media = {"items": [document_to_dict(d) for d in results]}
        resp.status = falcon.HTTP_200

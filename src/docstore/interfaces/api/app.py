"""Falcon ASGI application."""

import logging

import falcon.asgi
from falcon.asgi import App

from docstore.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docstore.interfaces.api.resources.health import HealthResource
from docstore.interfaces.api.resources.search import SearchResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params):
    """Log unhandled exceptions and answer with a bare 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    search_resource: SearchResource,
    health_resource: HealthResource,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App()
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/{document_id}", document_resource)
    app.add_route("/v1/search", search_resource)
    return app

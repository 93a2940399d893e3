"""Falcon ASGI application."""

import logging
from dataclasses import dataclass

import falcon
import falcon.asgi
from falcon.asgi import App

from chunkwise.interfaces.api.resources.documents import (
    DocumentResource,
    DocumentsResource,
    DocumentTitlesResource,
)
from chunkwise.interfaces.api.resources.health import HealthResource
from chunkwise.interfaces.api.resources.search import SearchResource

logger = logging.getLogger(__name__)


@dataclass
class Resources:
    """Route handlers mounted by create_app."""

    documents: DocumentsResource
    document: DocumentResource
    document_titles: DocumentTitlesResource
    search: SearchResource
    health: HealthResource


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal Server Error"}


def create_app(resources: Resources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/documents", resources.documents)
    app.add_route("/v1/documents/by-title", resources.document_titles)
    app.add_route("/v1/documents/{document_id}", resources.document)
    app.add_route("/v1/search", resources.search)
    return app

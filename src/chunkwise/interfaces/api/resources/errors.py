"""Translate domain exceptions into HTTP responses."""

import logging

import falcon
import falcon.asgi

from chunkwise.domain.exceptions import (
    ChunkwiseError,
    EmbeddingFailed,
    NotFound,
    PermissionDenied,
    RetrievalFailed,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS = [
    (ValidationError, falcon.HTTP_400, None),
    (PermissionDenied, falcon.HTTP_403, "Permission denied"),
    (NotFound, falcon.HTTP_404, "Document not found"),
    (RetrievalFailed, falcon.HTTP_502, "Search failed: embedding provider unavailable"),
    (EmbeddingFailed, falcon.HTTP_502, "Embedding provider unavailable"),
]


def require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return the request user, or set 401 and return None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user


def set_error(resp: falcon.asgi.Response, exc: ChunkwiseError) -> None:
    """Set status and body for a domain exception."""
    for exc_type, status, message in _STATUS:
        if isinstance(exc, exc_type):
            if status == falcon.HTTP_502:
                logger.warning("Upstream embedding failure: %s", exc)
            resp.status = status
            resp.media = {"error": message or str(exc)}
            return
    raise exc

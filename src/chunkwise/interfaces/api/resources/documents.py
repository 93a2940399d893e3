"""Document API resources."""

from uuid import UUID

import falcon
import falcon.asgi

from chunkwise.application.dto.document_dto import DocumentOutput, DocumentWriteInput
from chunkwise.application.use_cases.document.create_document import CreateDocumentUseCase
from chunkwise.application.use_cases.document.delete_document import DeleteDocumentUseCase
from chunkwise.application.use_cases.document.get_document import GetDocumentUseCase
from chunkwise.application.use_cases.document.list_documents import (
    ListDocumentsUseCase,
    ResolveDocumentTitlesUseCase,
)
from chunkwise.application.use_cases.document.update_document import UpdateDocumentUseCase
from chunkwise.domain.exceptions import ChunkwiseError
from chunkwise.interfaces.api.resources.errors import require_user, set_error


async def read_json_object(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> dict | None:
    """Parse a JSON object body, or set 400 and return None."""
    try:
        body = await req.get_media()
    except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
        body = None
    if not isinstance(body, dict):
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid request body"}
        return None
    return body


def _write_input(body: dict) -> DocumentWriteInput:
    title = body.get("title")
    content = body.get("content")
    return DocumentWriteInput(
        title=title if isinstance(title, str) else "",
        content=content if isinstance(content, str) else "",
    )


def _parse_document_id(document_id: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(document_id)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid document ID"}
        return None


class DocumentsResource:
    """GET /v1/documents - list; POST /v1/documents - create."""

    def __init__(
        self,
        list_documents: ListDocumentsUseCase,
        create_document: CreateDocumentUseCase,
    ) -> None:
        self._list_documents = list_documents
        self._create_document = create_document

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = require_user(req, resp)
        if not user:
            return
        documents = await self._list_documents.execute(user.user_id)
        resp.media = {"documents": [document_to_dict(d) for d in documents]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = require_user(req, resp)
        if not user:
            return
        body = await read_json_object(req, resp)
        if body is None:
            return
        try:
            result = await self._create_document.execute(user.user_id, _write_input(body))
        except ChunkwiseError as exc:
            set_error(resp, exc)
            return
        resp.media = {"document": document_to_dict(result)}
        resp.status = falcon.HTTP_201


class DocumentTitlesResource:
    """POST /v1/documents/by-title - map titles to the caller's document ids."""

    def __init__(self, resolve_titles: ResolveDocumentTitlesUseCase) -> None:
        self._resolve_titles = resolve_titles

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = require_user(req, resp)
        if not user:
            return
        body = await read_json_object(req, resp)
        if body is None:
            return
        titles = body.get("titles")
        try:
            mapping = await self._resolve_titles.execute(
                user.user_id, titles if isinstance(titles, list) else []
            )
        except ChunkwiseError as exc:
            set_error(resp, exc)
            return
        resp.media = {"title_to_id": {t: str(i) for t, i in mapping.items()}}
        resp.status = falcon.HTTP_200


class DocumentResource:
    """GET, PUT, DELETE /v1/documents/{document_id}."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        update_document: UpdateDocumentUseCase,
        delete_document: DeleteDocumentUseCase,
    ) -> None:
        self._get_document = get_document
        self._update_document = update_document
        self._delete_document = delete_document

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        user = require_user(req, resp)
        if not user:
            return
        doc_id = _parse_document_id(document_id, resp)
        if doc_id is None:
            return
        try:
            result = await self._get_document.execute(user.user_id, doc_id)
        except ChunkwiseError as exc:
            set_error(resp, exc)
            return
        resp.media = {"document": document_to_dict(result)}
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        user = require_user(req, resp)
        if not user:
            return
        doc_id = _parse_document_id(document_id, resp)
        if doc_id is None:
            return
        body = await read_json_object(req, resp)
        if body is None:
            return
        try:
            result = await self._update_document.execute(
                user.user_id, doc_id, _write_input(body)
            )
        except ChunkwiseError as exc:
            set_error(resp, exc)
            return
        resp.media = {"document": document_to_dict(result)}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        user = require_user(req, resp)
        if not user:
            return
        doc_id = _parse_document_id(document_id, resp)
        if doc_id is None:
            return
        try:
            await self._delete_document.execute(user.user_id, doc_id)
        except ChunkwiseError as exc:
            set_error(resp, exc)
            return
        resp.status = falcon.HTTP_204


def document_to_dict(d: DocumentOutput) -> dict:
    return {
        "id": str(d.id),
        "title": d.title,
        "content": d.content,
        "user_id": d.user_id,
        "created_at": d.created_at.isoformat(),
        "updated_at": d.updated_at.isoformat(),
    }

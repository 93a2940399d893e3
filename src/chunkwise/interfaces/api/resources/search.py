"""Search API resource."""

import falcon
import falcon.asgi

from chunkwise.application.dto.search_dto import SearchInput
from chunkwise.application.use_cases.search.search_chunks import SearchChunksUseCase
from chunkwise.domain.exceptions import ChunkwiseError
from chunkwise.interfaces.api.resources.documents import read_json_object
from chunkwise.interfaces.api.resources.errors import require_user, set_error


class SearchResource:
    """POST /v1/search - rank the caller's chunks against a query."""

    def __init__(self, search_chunks: SearchChunksUseCase, default_limit: int = 5) -> None:
        self._search_chunks = search_chunks
        self._default_limit = default_limit

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Execute search."""
        user = require_user(req, resp)
        if not user:
            return
        body = await read_json_object(req, resp)
        if body is None:
            return
        query = body.get("query")

        try:
            results = await self._search_chunks.execute(
                user.user_id,
                SearchInput(
                    query=query if isinstance(query, str) else "",
                    limit=body.get("limit", self._default_limit),
                ),
            )
        except ChunkwiseError as exc:
            set_error(resp, exc)
            return

        resp.media = {
            "chunks": [
                {
                    "chunk_id": str(r.chunk_id),
                    "document_id": str(r.document_id),
                    "document_title": r.document_title,
                    "chunk_index": r.chunk_index,
                    "content": r.content,
                    "similarity": round(r.similarity, 6),
                }
                for r in results
            ],
        }
        resp.status = falcon.HTTP_200

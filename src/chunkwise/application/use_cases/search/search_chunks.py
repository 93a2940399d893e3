"""Search use case - brute-force cosine scan with per-document diversity."""

import logging

from chunkwise.application.dto.search_dto import SearchInput
from chunkwise.application.ports import EmbeddingProvider
from chunkwise.domain.entities import ScoredChunk
from chunkwise.domain.exceptions import EmbeddingFailed, RetrievalFailed, ValidationError
from chunkwise.domain.services.ranking import rank_chunks

logger = logging.getLogger(__name__)


class SearchChunksUseCase:
    """Rank all of a user's embedded chunks against a query.

    There is no index: every search scans the owner's full chunk set.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        embedding_provider: EmbeddingProvider,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._embedding_provider = embedding_provider

    async def execute(self, user_id: str, input_data: SearchInput) -> list[ScoredChunk]:
        """Execute search. An empty list means nothing is indexed yet."""
        if not input_data.query or not input_data.query.strip():
            raise ValidationError("Query is required")
        if isinstance(input_data.limit, bool) or not isinstance(input_data.limit, int):
            raise ValidationError("Limit must be an integer")
        if input_data.limit <= 0:
            raise ValidationError("Limit must be positive")

        try:
            vectors = await self._embedding_provider.embed([input_data.query])
        except EmbeddingFailed as exc:
            raise RetrievalFailed("Could not embed search query") from exc
        if not vectors or not vectors[0]:
            raise RetrievalFailed("Embedding provider returned no vector for the query")
        query_embedding = vectors[0]

        async with self._uow_factory() as uow:
            candidates = await uow.chunks.list_candidates_by_owner(user_id)

        results = rank_chunks(query_embedding, candidates, input_data.limit)
        logger.info(
            "Search for user %s: %d candidates, %d results",
            user_id,
            len(candidates),
            len(results),
        )
        return results

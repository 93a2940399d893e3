"""Chunk repository port."""

from typing import Protocol
from uuid import UUID

from chunkwise.domain.entities import Chunk, ChunkCandidate


class ChunkRepository(Protocol):
    """Port for chunk persistence."""

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]: ...

    async def delete_by_document_id(self, document_id: UUID) -> None: ...

    async def list_candidates_by_owner(self, user_id: str) -> list[ChunkCandidate]: ...

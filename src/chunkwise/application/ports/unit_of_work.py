"""Unit of Work port - transactional boundary."""

from typing import Protocol

from chunkwise.application.ports.repositories.chunk_repository import ChunkRepository
from chunkwise.application.ports.repositories.document_repository import DocumentRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def chunks(self) -> ChunkRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

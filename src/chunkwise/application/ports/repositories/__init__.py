"""Repository ports."""

from chunkwise.application.ports.repositories.chunk_repository import ChunkRepository
from chunkwise.application.ports.repositories.document_repository import (
    DocumentRepository,
)

__all__ = [
    "ChunkRepository",
    "DocumentRepository",
]

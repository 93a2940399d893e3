"""Application ports - interfaces for external adapters."""

from chunkwise.application.ports.chunker import Chunker
from chunkwise.application.ports.embedding_provider import EmbeddingProvider
from chunkwise.application.ports.unit_of_work import UnitOfWork

__all__ = [
    "Chunker",
    "EmbeddingProvider",
    "UnitOfWork",
]

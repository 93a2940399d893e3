"""Domain entities."""

from chunkwise.domain.entities.chunk import Chunk, ChunkCandidate, ScoredChunk
from chunkwise.domain.entities.document import Document

__all__ = [
    "Chunk",
    "ChunkCandidate",
    "Document",
    "ScoredChunk",
]

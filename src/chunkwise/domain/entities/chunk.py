"""Chunk entities - stored text segments and their search-time views."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Chunk:
    """Chunk - text segment of a document with its embedding.

    chunk_index is zero-based and dense within a document, in reading order.
    """

    id: UUID
    document_id: UUID
    content: str
    embedding: list[float] | None
    chunk_index: int
    created_at: datetime


@dataclass
class ChunkCandidate:
    """Row of the per-owner scan set used by search."""

    chunk_id: UUID
    document_id: UUID
    document_title: str
    chunk_index: int
    content: str
    embedding: list[float] | None


@dataclass
class ScoredChunk:
    """Candidate with its cosine similarity to the query."""

    chunk_id: UUID
    document_id: UUID
    document_title: str
    chunk_index: int
    content: str
    similarity: float

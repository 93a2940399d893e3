"""Pytest fixtures for chunkwise tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from chunkwise.domain.entities import Chunk, ChunkCandidate, Document
from chunkwise.domain.value_objects import ChunkingParams


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Document] = {}

    async def get_by_id(self, document_id: UUID) -> Document | None:
        return self._by_id.get(document_id)

    async def list_by_owner(self, user_id: str) -> list[Document]:
        docs = [d for d in self._by_id.values() if d.user_id == user_id]
        return sorted(docs, key=lambda d: d.created_at, reverse=True)

    async def find_ids_by_titles(self, user_id: str, titles: list[str]) -> dict[str, UUID]:
        docs = sorted(
            (d for d in self._by_id.values() if d.user_id == user_id and d.title in titles),
            key=lambda d: d.created_at,
        )
        return {d.title: d.id for d in docs}

    async def create(self, document: Document) -> Document:
        self._by_id[document.id] = document
        return document

    async def update(self, document: Document) -> Document:
        self._by_id[document.id] = document
        return document

    async def delete(self, document_id: UUID) -> None:
        self._by_id.pop(document_id, None)


class FakeChunkRepository:
    """In-memory chunk repository; joins documents for owner scans."""

    def __init__(self, documents: FakeDocumentRepository) -> None:
        self._documents = documents
        self._by_document: dict[UUID, list[Chunk]] = {}

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]:
        for c in chunks:
            self._by_document.setdefault(c.document_id, []).append(c)
            self._by_document[c.document_id].sort(key=lambda x: x.chunk_index)
        return chunks

    async def delete_by_document_id(self, document_id: UUID) -> None:
        self._by_document.pop(document_id, None)

    def stored(self, document_id: UUID) -> list[Chunk]:
        """Chunks currently held for a document, by chunk_index."""
        return list(self._by_document.get(document_id, []))

    async def list_candidates_by_owner(self, user_id: str) -> list[ChunkCandidate]:
        result = []
        for document_id, chunks in self._by_document.items():
            doc = self._documents._by_id.get(document_id)
            if doc is None or doc.user_id != user_id:
                continue
            result.extend(
                ChunkCandidate(
                    chunk_id=c.id,
                    document_id=c.document_id,
                    document_title=doc.title,
                    chunk_index=c.chunk_index,
                    content=c.content,
                    embedding=c.embedding,
                )
                for c in chunks
                if c.embedding is not None
            )
        return result


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.chunks = FakeChunkRepository(self.documents)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    def add_document(
        self,
        user_id: str,
        title: str,
        embeddings: list[list[float] | None],
        age_minutes: int = 0,
    ) -> Document:
        """Helper: store a document with one chunk per embedding."""
        created = datetime(2026, 1, 1, tzinfo=UTC) + timedelta(minutes=age_minutes)
        doc = Document(
            id=uuid4(),
            title=title,
            content=" ".join(f"{title} part {i}." for i in range(len(embeddings))),
            user_id=user_id,
            created_at=created,
            updated_at=created,
        )
        self.documents._by_id[doc.id] = doc
        self.chunks._by_document[doc.id] = [
            Chunk(
                id=uuid4(),
                document_id=doc.id,
                content=f"{title} part {i}.",
                embedding=emb,
                chunk_index=i,
                created_at=created,
            )
            for i, emb in enumerate(embeddings)
        ]
        return doc


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork for every unit of work."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over fake_uow."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_embedding_provider():
    """AsyncMock for EmbeddingProvider - returns a fixed vector per text."""
    from unittest.mock import AsyncMock

    async def _embed(texts: list[str]) -> list[list[float]]:
        return [[0.1] * 8 for _ in texts]

    mock = AsyncMock()
    mock.embed = AsyncMock(side_effect=_embed)
    return mock


@pytest.fixture
def chunking_params() -> ChunkingParams:
    """Small chunking bounds so short test texts split."""
    return ChunkingParams(target_size=40, overlap_size=10)

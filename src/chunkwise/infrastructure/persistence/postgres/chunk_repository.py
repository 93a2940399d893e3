"""PostgreSQL chunk repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from chunkwise.domain.entities import Chunk, ChunkCandidate


def _to_floats(value: object) -> list[float] | None:
    """Embeddings are selected as real[], which psycopg loads as a list."""
    if value is None:
        return None
    return [float(x) for x in value]


class PostgresChunkRepository:
    """Chunk repository; embeddings live in a pgvector column."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]:
        """Create chunks in batch."""
        if not chunks:
            return chunks
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO document_chunk "
                "(id, document_id, content, embedding, chunk_index, created_at) "
                "VALUES (%s, %s, %s, %s::real[]::vector, %s, %s)",
                [
                    (c.id, c.document_id, c.content, c.embedding, c.chunk_index, c.created_at)
                    for c in chunks
                ],
            )
        return chunks

    async def delete_by_document_id(self, document_id: UUID) -> None:
        """Delete all chunks for document."""
        await self._conn.execute(
            "DELETE FROM document_chunk WHERE document_id = %s", (document_id,)
        )

    async def list_candidates_by_owner(self, user_id: str) -> list[ChunkCandidate]:
        """Full scan of the owner's embedded chunks, in chunk_index order per document."""
        cur = await self._conn.execute(
            "SELECT c.id, c.document_id, d.title, c.chunk_index, c.content, "
            "c.embedding::real[] "
            "FROM document_chunk c "
            "JOIN document d ON d.id = c.document_id "
            "WHERE d.user_id = %s AND c.embedding IS NOT NULL "
            "ORDER BY c.document_id, c.chunk_index",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [
            ChunkCandidate(
                chunk_id=r[0],
                document_id=r[1],
                document_title=r[2],
                chunk_index=r[3],
                content=r[4],
                embedding=_to_floats(r[5]),
            )
            for r in rows
        ]

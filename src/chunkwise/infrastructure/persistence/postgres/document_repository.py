"""PostgreSQL document repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from chunkwise.domain.entities import Document

_COLUMNS = "id, title, content, user_id, created_at, updated_at"


def _row_to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        title=r[1],
        content=r[2],
        user_id=r[3],
        created_at=r[4],
        updated_at=r[5],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID) -> Document | None:
        """Get document by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = %s",
            (document_id,),
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def list_by_owner(self, user_id: str) -> list[Document]:
        """List a user's documents, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE user_id = %s ORDER BY created_at DESC",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_document(r) for r in rows]

    async def find_ids_by_titles(self, user_id: str, titles: list[str]) -> dict[str, UUID]:
        """Map titles to document ids; the newest document wins on duplicate titles."""
        cur = await self._conn.execute(
            "SELECT title, id FROM document WHERE user_id = %s AND title = ANY(%s) "
            "ORDER BY created_at",
            (user_id, titles),
        )
        rows = await cur.fetchall()
        return {r[0]: r[1] for r in rows}

    async def create(self, document: Document) -> Document:
        """Create document."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.title,
                document.content,
                document.user_id,
                document.created_at,
                document.updated_at,
            ),
        )
        return document

    async def update(self, document: Document) -> Document:
        """Update document."""
        await self._conn.execute(
            "UPDATE document SET title=%s, content=%s, updated_at=%s WHERE id=%s",
            (document.title, document.content, document.updated_at, document.id),
        )
        return document

    async def delete(self, document_id: UUID) -> None:
        """Delete document; chunks cascade."""
        await self._conn.execute("DELETE FROM document WHERE id = %s", (document_id,))

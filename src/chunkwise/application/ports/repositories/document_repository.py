"""Document repository port."""

from typing import Protocol
from uuid import UUID

from chunkwise.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document persistence."""

    async def get_by_id(self, document_id: UUID) -> Document | None: ...

    async def list_by_owner(self, user_id: str) -> list[Document]: ...

    async def find_ids_by_titles(
        self, user_id: str, titles: list[str]
    ) -> dict[str, UUID]: ...

    async def create(self, document: Document) -> Document: ...

    async def update(self, document: Document) -> Document: ...

    async def delete(self, document_id: UUID) -> None: ...

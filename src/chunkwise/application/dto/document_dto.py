"""Document DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from chunkwise.domain.entities import Document


@dataclass
class DocumentWriteInput:
    """Input for creating or replacing a document."""

    title: str
    content: str


@dataclass
class DocumentOutput:
    """Output DTO for document."""

    id: UUID
    title: str
    content: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, document: Document) -> "DocumentOutput":
        return cls(
            id=document.id,
            title=document.title,
            content=document.content,
            user_id=document.user_id,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )

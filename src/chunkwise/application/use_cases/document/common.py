"""Helpers shared by document use cases."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from chunkwise.application.dto.document_dto import DocumentWriteInput
from chunkwise.application.ports import Chunker, EmbeddingProvider, UnitOfWork
from chunkwise.domain.entities import Chunk, Document
from chunkwise.domain.exceptions import EmbeddingFailed, NotFound, PermissionDenied, ValidationError
from chunkwise.domain.value_objects import ChunkingParams


def validate_write_input(input_data: DocumentWriteInput) -> None:
    """Title and content are both required."""
    if not input_data.title or not input_data.content:
        raise ValidationError("Title and content are required")


async def get_owned_document(uow: UnitOfWork, document_id: UUID, user_id: str) -> Document:
    """Load a document, raising NotFound or PermissionDenied."""
    document = await uow.documents.get_by_id(document_id)
    if document is None:
        raise NotFound("Document", str(document_id))
    if document.user_id != user_id:
        raise PermissionDenied("User does not own this document")
    return document


async def build_chunks(
    chunker: Chunker,
    embedding_provider: EmbeddingProvider,
    document_id: UUID,
    content: str,
    params: ChunkingParams,
) -> list[Chunk]:
    """Chunk content and embed every chunk; chunk_index follows reading order."""
    texts = chunker.chunk(content, params)
    embeddings = await embedding_provider.embed(texts)
    if len(embeddings) != len(texts):
        raise EmbeddingFailed(
            f"Expected {len(texts)} embeddings, provider returned {len(embeddings)}"
        )
    now = datetime.now(UTC)
    return [
        Chunk(
            id=uuid4(),
            document_id=document_id,
            content=text,
            embedding=emb,
            chunk_index=i,
            created_at=now,
        )
        for i, (text, emb) in enumerate(zip(texts, embeddings, strict=True))
    ]

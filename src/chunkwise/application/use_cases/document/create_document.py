"""Create document use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from chunkwise.application.dto.document_dto import DocumentOutput, DocumentWriteInput
from chunkwise.application.ports import Chunker, EmbeddingProvider
from chunkwise.application.use_cases.document.common import build_chunks, validate_write_input
from chunkwise.domain.entities import Document
from chunkwise.domain.value_objects import ChunkingParams

logger = logging.getLogger(__name__)


class CreateDocumentUseCase:
    """Store a new document: chunking, embedding, save in one transaction."""

    def __init__(
        self,
        unit_of_work_factory: type,
        chunker: Chunker,
        embedding_provider: EmbeddingProvider,
        chunking_params: ChunkingParams,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._chunker = chunker
        self._embedding_provider = embedding_provider
        self._chunking_params = chunking_params

    async def execute(self, user_id: str, input_data: DocumentWriteInput) -> DocumentOutput:
        """Create document and its chunks."""
        validate_write_input(input_data)

        now = datetime.now(UTC)
        document = Document(
            id=uuid4(),
            title=input_data.title,
            content=input_data.content,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        # Embed before opening the transaction so a provider failure writes nothing.
        chunks = await build_chunks(
            self._chunker,
            self._embedding_provider,
            document.id,
            document.content,
            self._chunking_params,
        )

        async with self._uow_factory() as uow:
            await uow.documents.create(document)
            await uow.chunks.create_batch(chunks)

        logger.info(
            "Created document %s for user %s with %d chunks",
            document.id,
            user_id,
            len(chunks),
        )
        return DocumentOutput.from_entity(document)

"""Update document use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from chunkwise.application.dto.document_dto import DocumentOutput, DocumentWriteInput
from chunkwise.application.ports import Chunker, EmbeddingProvider
from chunkwise.application.use_cases.document.common import (
    build_chunks,
    get_owned_document,
    validate_write_input,
)
from chunkwise.domain.value_objects import ChunkingParams

logger = logging.getLogger(__name__)


class UpdateDocumentUseCase:
    """Replace title and content, regenerating every chunk.

    Embedding happens between two short transactions so no pooled connection
    is held while the provider is called. The second transaction re-checks
    ownership, then deletes the old chunks and inserts the new ones, so
    searches never see a half-regenerated document.
    """

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

    async def execute(
        self, user_id: str, document_id: UUID, input_data: DocumentWriteInput
    ) -> DocumentOutput:
        """Update document and regenerate its chunks."""
        validate_write_input(input_data)

        async with self._uow_factory() as uow:
            await get_owned_document(uow, document_id, user_id)

        chunks = await build_chunks(
            self._chunker,
            self._embedding_provider,
            document_id,
            input_data.content,
            self._chunking_params,
        )

        async with self._uow_factory() as uow:
            # May have been deleted while the embeddings were computed.
            existing = await get_owned_document(uow, document_id, user_id)
            document = replace(
                existing,
                title=input_data.title,
                content=input_data.content,
                updated_at=datetime.now(UTC),
            )
            await uow.documents.update(document)
            await uow.chunks.delete_by_document_id(document_id)
            await uow.chunks.create_batch(chunks)

        logger.info("Updated document %s, regenerated %d chunks", document_id, len(chunks))
        return DocumentOutput.from_entity(document)

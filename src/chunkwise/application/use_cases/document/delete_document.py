"""Delete document use case."""

import logging
from uuid import UUID

from chunkwise.application.use_cases.document.common import get_owned_document

logger = logging.getLogger(__name__)


class DeleteDocumentUseCase:
    """Delete a document; its chunks go with it (ON DELETE CASCADE)."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, document_id: UUID) -> None:
        async with self._uow_factory() as uow:
            await get_owned_document(uow, document_id, user_id)
            await uow.documents.delete(document_id)
        logger.info("Deleted document %s", document_id)

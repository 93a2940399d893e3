"""Get document use case."""

from uuid import UUID

from chunkwise.application.dto.document_dto import DocumentOutput
from chunkwise.application.use_cases.document.common import get_owned_document


class GetDocumentUseCase:
    """Get document by id for its owner."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, document_id: UUID) -> DocumentOutput:
        """Get document by id."""
        async with self._uow_factory() as uow:
            document = await get_owned_document(uow, document_id, user_id)
            return DocumentOutput.from_entity(document)

"""List and lookup use cases for a user's documents."""

from uuid import UUID

from chunkwise.application.dto.document_dto import DocumentOutput
from chunkwise.domain.exceptions import ValidationError


class ListDocumentsUseCase:
    """List the caller's documents, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str) -> list[DocumentOutput]:
        async with self._uow_factory() as uow:
            documents = await uow.documents.list_by_owner(user_id)
            return [DocumentOutput.from_entity(d) for d in documents]


class ResolveDocumentTitlesUseCase:
    """Map titles to ids among the caller's documents; unknown titles are omitted."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, titles: list[str]) -> dict[str, UUID]:
        if not titles or not all(isinstance(t, str) for t in titles):
            raise ValidationError("A non-empty list of titles is required")
        async with self._uow_factory() as uow:
            return await uow.documents.find_ids_by_titles(user_id, titles)

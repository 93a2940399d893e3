"""Fixtures for API tests."""

from unittest.mock import AsyncMock

import pytest
from falcon.testing import TestClient

from chunkwise.application.use_cases.document.create_document import CreateDocumentUseCase
from chunkwise.application.use_cases.document.delete_document import DeleteDocumentUseCase
from chunkwise.application.use_cases.document.get_document import GetDocumentUseCase
from chunkwise.application.use_cases.document.list_documents import (
    ListDocumentsUseCase,
    ResolveDocumentTitlesUseCase,
)
from chunkwise.application.use_cases.document.update_document import UpdateDocumentUseCase
from chunkwise.application.use_cases.search.search_chunks import SearchChunksUseCase
from chunkwise.domain.value_objects import ChunkingParams
from chunkwise.infrastructure.auth.keycloak_provider import TokenUser
from chunkwise.infrastructure.chunking.sentence_chunker import SentenceChunker
from chunkwise.interfaces.api.app import Resources, create_app
from chunkwise.interfaces.api.middleware.auth import AuthMiddleware
from chunkwise.interfaces.api.resources.documents import (
    DocumentResource,
    DocumentsResource,
    DocumentTitlesResource,
)
from chunkwise.interfaces.api.resources.health import HealthResource
from chunkwise.interfaces.api.resources.search import SearchResource

TOKENS = {"token-1": "user-1", "token-2": "user-2"}


class FakeTokenProvider:
    """Resolves the fixed test tokens."""

    def decode_token(self, token: str) -> TokenUser | None:
        user_id = TOKENS.get(token)
        return TokenUser(user_id=user_id, email=None) if user_id else None


@pytest.fixture
def query_embedding_provider():
    """Provider returning [1.0, 0.0] for every text."""

    async def _embed(texts: list[str]) -> list[list[float]]:
        return [[1.0, 0.0] for _ in texts]

    mock = AsyncMock()
    mock.embed = AsyncMock(side_effect=_embed)
    return mock


@pytest.fixture
def app(uow_factory, query_embedding_provider):
    """Falcon ASGI app wired to in-memory fakes."""
    chunker = SentenceChunker()
    resources = Resources(
        documents=DocumentsResource(
            ListDocumentsUseCase(uow_factory),
            CreateDocumentUseCase(
                unit_of_work_factory=uow_factory,
                chunker=chunker,
                embedding_provider=query_embedding_provider,
                chunking_params=ChunkingParams(30, 10),
            ),
        ),
        document=DocumentResource(
            GetDocumentUseCase(uow_factory),
            UpdateDocumentUseCase(
                unit_of_work_factory=uow_factory,
                chunker=chunker,
                embedding_provider=query_embedding_provider,
                chunking_params=ChunkingParams(1000, 200),
            ),
            DeleteDocumentUseCase(uow_factory),
        ),
        document_titles=DocumentTitlesResource(ResolveDocumentTitlesUseCase(uow_factory)),
        search=SearchResource(
            SearchChunksUseCase(uow_factory, query_embedding_provider), default_limit=5
        ),
        health=HealthResource(),
    )
    return create_app(resources, middleware=[AuthMiddleware(FakeTokenProvider())])


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def auth() -> dict[str, str]:
    return {"Authorization": "Bearer token-1"}

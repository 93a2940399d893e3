"""Application entry point and composition root."""

import logging

from chunkwise import __version__
from chunkwise.application.use_cases.document.create_document import CreateDocumentUseCase
from chunkwise.application.use_cases.document.delete_document import DeleteDocumentUseCase
from chunkwise.application.use_cases.document.get_document import GetDocumentUseCase
from chunkwise.application.use_cases.document.list_documents import (
    ListDocumentsUseCase,
    ResolveDocumentTitlesUseCase,
)
from chunkwise.application.use_cases.document.update_document import UpdateDocumentUseCase
from chunkwise.application.use_cases.search.search_chunks import SearchChunksUseCase
from chunkwise.config import Settings, get_settings
from chunkwise.domain.value_objects import ChunkingParams
from chunkwise.infrastructure.auth.keycloak_provider import KeycloakProvider
from chunkwise.infrastructure.chunking.sentence_chunker import SentenceChunker
from chunkwise.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from chunkwise.infrastructure.persistence.postgres.connection import create_pool
from chunkwise.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from chunkwise.interfaces.api.app import Resources, create_app
from chunkwise.interfaces.api.middleware.auth import AuthMiddleware
from chunkwise.interfaces.api.middleware.cors import CORSMiddleware
from chunkwise.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from chunkwise.interfaces.api.resources.documents import (
    DocumentResource,
    DocumentsResource,
    DocumentTitlesResource,
)
from chunkwise.interfaces.api.resources.health import HealthResource
from chunkwise.interfaces.api.resources.search import SearchResource
from chunkwise.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_chunkwise_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.debug)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak not configured; all requests run as 'anonymous'")

    embedding_provider = OpenAIEmbeddingProvider(
        base_url=settings.embedding_api_url,
        api_key=settings.embedding_api_key,
        model=settings.embedding_model,
        timeout=settings.embedding_timeout_seconds,
        batch_size=settings.embedding_batch_size,
        max_concurrency=settings.embedding_max_concurrency,
    )
    chunker = SentenceChunker()

    create_document = CreateDocumentUseCase(
        unit_of_work_factory=uow_factory,
        chunker=chunker,
        embedding_provider=embedding_provider,
        chunking_params=ChunkingParams(
            settings.chunk_size_on_create, settings.chunk_overlap_on_create
        ),
    )
    update_document = UpdateDocumentUseCase(
        unit_of_work_factory=uow_factory,
        chunker=chunker,
        embedding_provider=embedding_provider,
        chunking_params=ChunkingParams(
            settings.chunk_size_on_update, settings.chunk_overlap_on_update
        ),
    )
    search_chunks = SearchChunksUseCase(
        unit_of_work_factory=uow_factory,
        embedding_provider=embedding_provider,
    )

    resources = Resources(
        documents=DocumentsResource(ListDocumentsUseCase(uow_factory), create_document),
        document=DocumentResource(
            GetDocumentUseCase(uow_factory),
            update_document,
            DeleteDocumentUseCase(uow_factory),
        ),
        document_titles=DocumentTitlesResource(ResolveDocumentTitlesUseCase(uow_factory)),
        search=SearchResource(search_chunks, default_limit=settings.search_default_limit),
        health=HealthResource(pool),
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        resources,
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    logger.info("chunkwise v%s starting", __version__)
    uvicorn.run(create_chunkwise_app(), host="0.0.0.0", port=8000)

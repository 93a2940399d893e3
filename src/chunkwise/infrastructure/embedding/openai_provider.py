"""OpenAI-compatible embedding provider."""

import asyncio
import logging

from openai import AsyncOpenAI, OpenAIError

from chunkwise.domain.exceptions import EmbeddingFailed

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API.

    Texts are sent in batches of ``batch_size``; at most ``max_concurrency``
    requests are in flight, and each request is bounded by ``timeout``
    seconds. Any failure cancels the batches still in flight and aborts the
    whole call with EmbeddingFailed.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        timeout: float = 10.0,
        batch_size: int = 64,
        max_concurrency: int = 4,
    ) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if max_concurrency <= 0:
            raise ValueError("max_concurrency must be positive")
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model
        self._timeout = timeout
        self._batch_size = batch_size
        self._max_concurrency = max_concurrency

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts, in input order."""
        if not texts:
            return []
        semaphore = asyncio.Semaphore(self._max_concurrency)
        batches = [
            texts[i : i + self._batch_size] for i in range(0, len(texts), self._batch_size)
        ]
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._embed_batch(batch, semaphore)) for batch in batches
                ]
        except ExceptionGroup as exc:
            # The first failed batch cancels the rest; report that failure.
            failed = exc.subgroup(EmbeddingFailed)
            if failed is None:
                raise
            raise failed.exceptions[0]
        return [vector for task in tasks for vector in task.result()]

    async def _embed_batch(
        self, texts: list[str], semaphore: asyncio.Semaphore
    ) -> list[list[float]]:
        async with semaphore:
            try:
                response = await asyncio.wait_for(
                    self._client.embeddings.create(model=self._model, input=texts),
                    timeout=self._timeout,
                )
            except TimeoutError as exc:
                logger.warning(
                    "Embedding request for %d texts timed out after %.1fs",
                    len(texts),
                    self._timeout,
                )
                raise EmbeddingFailed(
                    f"Embedding request timed out after {self._timeout}s"
                ) from exc
            except OpenAIError as exc:
                logger.error("Embedding request failed: %s", exc)
                raise EmbeddingFailed(f"Embedding request failed: {exc}") from exc

        data = sorted(response.data, key=lambda d: d.index)
        if len(data) != len(texts) or any(not d.embedding for d in data):
            raise EmbeddingFailed(
                f"Embedding response incomplete: {len(data)} vectors for {len(texts)} texts"
            )
        return [d.embedding for d in data]

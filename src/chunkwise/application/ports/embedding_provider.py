"""Embedding provider port - OpenAI compatible API."""

from typing import Protocol


class EmbeddingProvider(Protocol):
    """Port for generating text embeddings.

    Returns one vector per input text, in input order. Failures are raised
    as EmbeddingFailed.
    """

    async def embed(self, texts: list[str]) -> list[list[float]]: ...

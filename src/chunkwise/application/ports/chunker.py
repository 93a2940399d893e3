"""Chunker port - text splitting strategies."""

from typing import Protocol

from chunkwise.domain.value_objects import ChunkingParams


class Chunker(Protocol):
    """Port for splitting text into chunks."""

    def chunk(self, text: str, params: ChunkingParams) -> list[str]: ...

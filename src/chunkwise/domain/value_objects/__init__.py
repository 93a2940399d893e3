"""Domain value objects."""

from chunkwise.domain.value_objects.chunking_params import ChunkingParams

__all__ = [
    "ChunkingParams",
]

"""Domain exceptions."""


class ChunkwiseError(Exception):
    """Base exception for chunkwise."""

    pass


class PermissionDenied(ChunkwiseError):
    """User does not own the requested resource."""

    pass


class NotFound(ChunkwiseError):
    """Requested resource was not found."""

    pass


class ValidationError(ChunkwiseError):
    """Validation failed for input data."""

    pass


class EmbeddingFailed(ChunkwiseError):
    """Embedding provider could not produce vectors (network, timeout, model)."""

    pass


class RetrievalFailed(ChunkwiseError):
    """Search aborted because the query could not be embedded."""

    pass

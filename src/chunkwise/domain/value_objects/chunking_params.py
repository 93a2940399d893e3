"""Chunking parameters for sentence-aware splitting."""

from dataclasses import dataclass

from chunkwise.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ChunkingParams:
    """Target chunk length and overlap, both in characters."""

    target_size: int
    overlap_size: int

    def __post_init__(self) -> None:
        if self.target_size <= 0:
            raise ValidationError(f"target_size must be positive, got {self.target_size}")
        if self.overlap_size < 0:
            raise ValidationError(
                f"overlap_size must not be negative, got {self.overlap_size}"
            )

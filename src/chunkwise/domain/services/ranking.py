"""Brute-force ranking and per-document diversity selection."""

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

from chunkwise.domain.entities import ChunkCandidate, ScoredChunk
from chunkwise.domain.services.similarity import cosine_similarity

SCORE_TOLERANCE = 0.01
MAX_CHUNKS_PER_DOCUMENT = 2
SCAN_FACTOR = 3


def score_candidates(
    query_embedding: Sequence[float],
    candidates: Iterable[ChunkCandidate],
) -> list[ScoredChunk]:
    """Score every candidate that has an embedding; the rest are dropped."""
    return [
        ScoredChunk(
            chunk_id=c.chunk_id,
            document_id=c.document_id,
            document_title=c.document_title,
            chunk_index=c.chunk_index,
            content=c.content,
            similarity=cosine_similarity(query_embedding, c.embedding),
        )
        for c in candidates
        if c.embedding is not None
    ]


def _compare(a: ScoredChunk, b: ScoredChunk) -> float:
    if abs(a.similarity - b.similarity) > SCORE_TOLERANCE:
        return b.similarity - a.similarity
    if a.document_id == b.document_id:
        return a.chunk_index - b.chunk_index
    return b.similarity - a.similarity


def sort_scored(scored: Iterable[ScoredChunk]) -> list[ScoredChunk]:
    """Similarity descending; near-ties within one document keep reading order.

    The 0.01 tolerance makes the comparison non-transitive: in a dense band of
    scores (a within 0.01 of b, b of c, but not a of c) the sort can still
    place a later chunk of a document before an earlier one. Pairs that are
    compared directly are always ordered by chunk_index.
    """
    return sorted(scored, key=cmp_to_key(_compare))


def select_diverse(
    ranked: Sequence[ScoredChunk],
    limit: int,
    per_document_cap: int = MAX_CHUNKS_PER_DOCUMENT,
    scan_factor: int = SCAN_FACTOR,
) -> list[ScoredChunk]:
    """Pick up to ``limit`` chunks, at most ``per_document_cap`` per document.

    The first pass looks at the top ``limit * scan_factor`` entries only, the
    second at the whole list. If the cap still leaves the result short (too
    few distinct documents), the remaining entries are admitted in rank order
    regardless of the cap. Selection order is kept; nothing is re-sorted.
    """
    if limit <= 0:
        return []

    selected: list[ScoredChunk] = []
    taken: set[int] = set()
    per_document: Counter = Counter()

    def _fill(window: Sequence[ScoredChunk], capped: bool) -> None:
        for position, chunk in enumerate(window):
            if len(selected) >= limit:
                return
            if position in taken:
                continue
            if capped and per_document[chunk.document_id] >= per_document_cap:
                continue
            selected.append(chunk)
            taken.add(position)
            per_document[chunk.document_id] += 1

    _fill(ranked[: limit * scan_factor], capped=True)
    if len(selected) < limit:
        _fill(ranked, capped=True)
    if len(selected) < limit:
        _fill(ranked, capped=False)
    return selected


def rank_chunks(
    query_embedding: Sequence[float],
    candidates: Iterable[ChunkCandidate],
    limit: int,
) -> list[ScoredChunk]:
    """Score, sort and diversify a full candidate pool."""
    return select_diverse(sort_scored(score_candidates(query_embedding, candidates)), limit)

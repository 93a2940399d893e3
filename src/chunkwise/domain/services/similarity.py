"""Vector similarity."""

import math
from collections.abc import Sequence


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors.

    Returns 0.0 when the vectors differ in length or either has zero norm,
    so mismatched or degenerate embeddings rank as unrelated instead of
    failing the whole search. The result is not clamped to [-1, 1].
    """
    if len(vec_a) != len(vec_b):
        return 0.0

    dot_product = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for a, b in zip(vec_a, vec_b):
        dot_product += a * b
        norm_a += a * a
        norm_b += b * b

    denominator = math.sqrt(norm_a) * math.sqrt(norm_b)
    if denominator == 0:
        return 0.0
    return dot_product / denominator

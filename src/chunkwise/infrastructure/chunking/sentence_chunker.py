"""Sentence-aware text chunker with trailing-sentence overlap."""

import re

from chunkwise.domain.value_objects import ChunkingParams

DEFAULT_TERMINATORS = "。！？.!?\n"

# These also occur inside tokens (3.14, example.com); they only end a
# sentence when followed by whitespace or the end of the text.
INLINE_TERMINATORS = ".!?"

DEFAULT_TARGET_SIZE = 600
DEFAULT_OVERLAP_SIZE = 150

Span = tuple[int, int]


class SentenceChunker:
    """Chunker that never cuts a sentence and carries trailing context forward.

    Chunks are slices of the input text: the whitespace between sentences is
    kept as written, and a chunk's length is its length in the document.
    """

    def __init__(self, terminators: str = DEFAULT_TERMINATORS) -> None:
        if not terminators:
            raise ValueError("At least one sentence terminator is required")
        self._terminators = terminators
        self._boundary = re.compile(f"[{re.escape(terminators)}]+")

    def split_sentences(self, text: str) -> list[str]:
        """Split on terminator runs, keeping each run with the sentence before it."""
        return [text[start:end] for start, end in self._sentence_spans(text)]

    def chunk(self, text: str, params: ChunkingParams) -> list[str]:
        """Split text into overlapping, sentence-aligned chunks."""
        chunks: list[str] = []
        buffer: list[Span] = []

        for span in self._sentence_spans(text):
            if buffer and span[1] - buffer[0][0] > params.target_size:
                chunks.append(text[buffer[0][0] : buffer[-1][1]])
                buffer = self._overlap(buffer, params.overlap_size)
            buffer.append(span)

        if buffer:
            chunks.append(text[buffer[0][0] : buffer[-1][1]])

        return chunks or [text]

    def _sentence_spans(self, text: str) -> list[Span]:
        spans: list[Span] = []
        start = 0
        for match in self._boundary.finditer(text):
            if not self._ends_sentence(text, match):
                continue
            _append_stripped(text, start, match.end(), spans)
            start = match.end()
        _append_stripped(text, start, len(text), spans)
        return spans

    @staticmethod
    def _ends_sentence(text: str, match: re.Match) -> bool:
        if any(c not in INLINE_TERMINATORS for c in match.group()):
            return True
        end = match.end()
        return end == len(text) or text[end].isspace()

    @staticmethod
    def _overlap(buffer: list[Span], overlap_size: int) -> list[Span]:
        """Trailing sentences whose combined span first reaches overlap_size."""
        end = buffer[-1][1]
        seed: list[Span] = []
        for span in reversed(buffer):
            if (end - seed[0][0] if seed else 0) >= overlap_size:
                break
            seed.insert(0, span)
        return seed


def _append_stripped(text: str, start: int, end: int, spans: list[Span]) -> None:
    """Append text[start:end] without surrounding whitespace, unless blank."""
    segment = text[start:end]
    stripped = segment.strip()
    if stripped:
        begin = start + len(segment) - len(segment.lstrip())
        spans.append((begin, begin + len(stripped)))


def chunk_text(
    content: str,
    target_size: int = DEFAULT_TARGET_SIZE,
    overlap_size: int = DEFAULT_OVERLAP_SIZE,
) -> list[str]:
    """Chunk content with the default terminator set."""
    return SentenceChunker().chunk(content, ChunkingParams(target_size, overlap_size))

"""Unit tests for SentenceChunker."""

import pytest

from chunkwise.domain.exceptions import ValidationError
from chunkwise.domain.value_objects import ChunkingParams
from chunkwise.infrastructure.chunking.sentence_chunker import SentenceChunker, chunk_text

ARTICLE = (
    "Alpha starts the story. Bravo follows closely behind. Charlie has a question? "
    "Delta answers loudly! Echo repeats the answer. Foxtrot closes the loop. "
    "Golf adds a footnote. Hotel ends it all."
)


def _sentences(chunk: str) -> list[str]:
    return SentenceChunker().split_sentences(chunk)


def test_split_keeps_terminator_with_sentence() -> None:
    """Terminators stay attached to the sentence they end."""
    chunker = SentenceChunker()
    assert chunker.split_sentences("S1. S2! S3?") == ["S1.", "S2!", "S3?"]


def test_split_treats_terminator_runs_as_one_boundary() -> None:
    """'!!!' and '??' do not produce empty sentences."""
    chunker = SentenceChunker()
    assert chunker.split_sentences("Wait!!! Really?? Yes.") == ["Wait!!!", "Really??", "Yes."]


def test_split_drops_blank_lines() -> None:
    """Whitespace-only segments between newlines are dropped."""
    chunker = SentenceChunker()
    text = "line one\nline two\n\n  \nline three"
    assert chunker.split_sentences(text) == ["line one", "line two", "line three"]


def test_split_full_width_terminators() -> None:
    """Full-width period, exclamation and question marks are boundaries."""
    chunker = SentenceChunker()
    text = "今日は晴れです。明日は雨です！本当に？"
    assert chunker.split_sentences(text) == ["今日は晴れです。", "明日は雨です！", "本当に？"]


def test_split_ignores_periods_inside_tokens() -> None:
    """Decimals, domains and abbreviations do not end a sentence mid-token."""
    chunker = SentenceChunker()
    text = "Pi is 3.14. Visit example.com now! Use e.g. a map."
    assert chunker.split_sentences(text) == [
        "Pi is 3.14.",
        "Visit example.com now!",
        "Use e.g.",
        "a map.",
    ]


def test_custom_terminators() -> None:
    """Terminator set is configurable."""
    chunker = SentenceChunker(terminators=";")
    assert chunker.split_sentences("a; b;c") == ["a;", "b;", "c"]


def test_empty_terminator_set_rejected() -> None:
    with pytest.raises(ValueError, match="terminator"):
        SentenceChunker(terminators="")


def test_example_scenario_overlaps_previous_chunk() -> None:
    """Five short sentences with tight bounds yield overlapping chunks."""
    chunks = SentenceChunker().chunk("S1. S2. S3. S4. S5.", ChunkingParams(10, 5))
    assert chunks == ["S1. S2.", "S1. S2. S3.", "S2. S3. S4.", "S3. S4. S5."]
    for prev, nxt in zip(chunks, chunks[1:]):
        before, after = _sentences(prev), _sentences(nxt)
        assert any(before[-k:] == after[:k] for k in range(1, len(before) + 1))


def test_example_scenario_without_overlap_respects_target() -> None:
    chunks = SentenceChunker().chunk("S1. S2. S3. S4. S5.", ChunkingParams(10, 0))
    assert chunks == ["S1. S2.", "S3. S4.", "S5."]


def test_wide_sentences_keep_original_spacing() -> None:
    """Full-width sentences are written without spaces and stay that way."""
    text = "今日は晴れです。明日は雨です！本当に？"
    assert SentenceChunker().chunk(text, ChunkingParams(20, 0)) == [text]


def test_wide_sentences_split_without_overlap() -> None:
    text = "今日は晴れです。明日は雨です！本当に？"
    chunks = SentenceChunker().chunk(text, ChunkingParams(10, 0))
    assert chunks == ["今日は晴れです。", "明日は雨です！", "本当に？"]


def test_decimals_and_domains_survive_chunking() -> None:
    text = "Version 3.14 ships today. See example.com for notes."
    chunks = SentenceChunker().chunk(text, ChunkingParams(600, 150))
    assert chunks == [text]
    assert "3.14" in chunks[0]
    assert "example.com" in chunks[0]


@pytest.mark.parametrize("target,overlap", [(15, 0), (30, 10), (50, 25), (600, 150)])
def test_chunks_are_substrings_of_input(target: int, overlap: int) -> None:
    """Stored chunk text is copied from the document, never rewritten."""
    text = (
        "Release 2.5.1 is out.  It fixes www.example.org links!\n"
        "Costs fell by 0.75 percent?  See docs.python.org for details.\t"
        "最後の文です。次の文です！"
    )
    chunks = SentenceChunker().chunk(text, ChunkingParams(target, overlap))
    assert len(chunks) >= 1
    for chunk in chunks:
        assert chunk in text
        assert chunk == chunk.strip()


def test_original_spacing_between_sentences_is_kept() -> None:
    text = "One.   Two.\nThree."
    assert SentenceChunker().chunk(text, ChunkingParams(100, 0)) == [text]


def test_short_text_single_chunk() -> None:
    assert SentenceChunker().chunk("Just one sentence.", ChunkingParams(600, 150)) == [
        "Just one sentence."
    ]


def test_text_without_terminators_is_one_chunk() -> None:
    assert SentenceChunker().chunk("no terminators here", ChunkingParams(5, 0)) == [
        "no terminators here"
    ]


def test_overlong_sentence_is_not_cut() -> None:
    """A sentence longer than target_size becomes its own oversized chunk."""
    long_sentence = "a" * 50 + "."
    chunks = SentenceChunker().chunk(f"Hi. {long_sentence} Bye.", ChunkingParams(10, 0))
    assert chunks == ["Hi.", long_sentence, "Bye."]


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_no_sentences_returns_original_text(text: str) -> None:
    """Degenerate input comes back untouched rather than as an empty list."""
    assert SentenceChunker().chunk(text, ChunkingParams(10, 2)) == [text]


@pytest.mark.parametrize("target,overlap", [(20, 0), (40, 10), (60, 25), (100, 50)])
def test_output_never_empty(target: int, overlap: int) -> None:
    assert SentenceChunker().chunk(ARTICLE, ChunkingParams(target, overlap))


@pytest.mark.parametrize("target", [20, 45, 70])
def test_chunk_size_bound_without_overlap(target: int) -> None:
    """Multi-sentence chunks stay within target_size, spacing included."""
    chunks = SentenceChunker().chunk(ARTICLE, ChunkingParams(target, 0))
    for chunk in chunks:
        if len(_sentences(chunk)) > 1:
            assert len(chunk) <= target


@pytest.mark.parametrize("target,overlap", [(30, 0), (40, 10), (60, 30), (80, 5)])
def test_sentences_reconstruct_in_order(target: int, overlap: int) -> None:
    """Dropping overlap duplicates restores the original sentence sequence."""
    chunks = SentenceChunker().chunk(ARTICLE, ChunkingParams(target, overlap))
    rebuilt = _sentences(chunks[0])
    for chunk in chunks[1:]:
        current = _sentences(chunk)
        shared = 0
        for m in range(len(current) - 1, 0, -1):
            if rebuilt[-m:] == current[:m]:
                shared = m
                break
        rebuilt.extend(current[shared:])
    assert rebuilt == _sentences(ARTICLE)


@pytest.mark.parametrize("target,overlap", [(30, 1), (40, 10), (60, 30)])
def test_consecutive_chunks_share_a_sentence(target: int, overlap: int) -> None:
    """With overlap enabled, each chunk starts with the tail of the previous one."""
    chunks = SentenceChunker().chunk(ARTICLE, ChunkingParams(target, overlap))
    assert len(chunks) > 1
    for prev, nxt in zip(chunks, chunks[1:]):
        assert _sentences(prev)[-1] in _sentences(nxt)
        assert _sentences(nxt)[0] in _sentences(prev)


def test_zero_overlap_shares_nothing() -> None:
    chunks = SentenceChunker().chunk(ARTICLE, ChunkingParams(30, 0))
    for prev, nxt in zip(chunks, chunks[1:]):
        assert not set(_sentences(prev)) & set(_sentences(nxt))


def test_chunk_text_defaults() -> None:
    """chunk_text uses 600/150 and the default terminators."""
    assert chunk_text(ARTICLE) == [ARTICLE]


@pytest.mark.parametrize("target,overlap", [(0, 0), (-5, 0), (10, -1)])
def test_invalid_params_rejected(target: int, overlap: int) -> None:
    with pytest.raises(ValidationError):
        chunk_text(ARTICLE, target, overlap)

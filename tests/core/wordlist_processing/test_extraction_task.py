"""Tests for LLM vocabulary extraction."""

import pytest
from tenacity import wait_none

from vocab_backend.core.exceptions import WordExtractionError
from vocab_backend.core.wordlist_processing.llm import ExtractedWords
from vocab_backend.core.wordlist_processing.tasks import ExtractionTask
from vocab_backend.core.wordlist_processing.tasks.extraction_task import (
    clean_word_line,
    fallback_extraction,
    normalize_candidate,
    sample_text,
)

PASSAGE = "Mitochondria produce energy for the cell through respiration."


def _task(llm, max_retries: int = 3) -> ExtractionTask:
    return ExtractionTask(llm=llm, max_retries=max_retries, retry_wait=wait_none())


class TestWordHelpers:
    """Test normalization helpers."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("1. Photosynthesis", "Photosynthesis"),
            ("- **chlorophyll**", "chlorophyll"),
            ("3) `enzyme`", "enzyme"),
            ("[osmosis]", "osmosis"),
            ("• membrane!", "membrane"),
        ],
    )
    def test_clean_word_line(self, line: str, expected: str) -> None:
        """Should strip numbering, bullets and markdown."""
        assert clean_word_line(line) == expected

    def test_normalize_candidate_takes_first_long_token(self) -> None:
        """Should reduce a phrase to its first token of three or more letters."""
        assert normalize_candidate("an carbon dioxide") == "carbon"

    def test_normalize_candidate_rejects_noise(self) -> None:
        """Should return None when nothing usable remains."""
        assert normalize_candidate("42") is None
        assert normalize_candidate("***") is None

    def test_sample_text_short_passthrough(self) -> None:
        """Should leave short text unsampled."""
        assert sample_text("short text", max_chars=100) == ("short text", False)

    def test_sample_text_takes_three_regions(self) -> None:
        """Should keep beginning, middle and end slices."""
        text = "B" * 500 + "M" * 500 + "E" * 500

        sampled, was_sampled = sample_text(text, max_chars=100)

        beginning, middle, end = sampled.split("\n...\n")
        assert was_sampled is True
        assert beginning == "B" * 40
        assert middle == "M" * 30
        assert end == "E" * 30

    def test_fallback_extraction(self) -> None:
        """Should return unique non-stop-words in text order."""
        words = fallback_extraction(PASSAGE + " Energy matters.", max_words=10)

        assert words == ["mitochondria", "produce", "energy", "cell", "through", "respiration", "matters"]

    def test_fallback_extraction_respects_cap(self) -> None:
        """Should stop at max_words."""
        assert fallback_extraction(PASSAGE, max_words=2) == ["mitochondria", "produce"]


class TestExtractionTask:
    """Test ExtractionTask.extract."""

    @pytest.mark.asyncio
    async def test_normalizes_and_filters_llm_words(self, llm_factory) -> None:
        """Should clean, dedupe and filter the model's words."""
        llm = llm_factory(ExtractedWords(words=[
            "1. Photosynthesis",
            "**Chlorophyll**",
            "the",
            "ab",
            "photosynthesis",
            "carbon dioxide",
        ]))

        result = await _task(llm).extract(PASSAGE, max_words=10)

        assert result.words == ["photosynthesis", "chlorophyll", "carbon"]
        assert result.used_fallback is False
        assert result.confidence == 0.85

    @pytest.mark.asyncio
    async def test_caps_word_count(self, llm_factory) -> None:
        """Should return at most max_words words."""
        llm = llm_factory(ExtractedWords(words=[f"term{letter}" for letter in "abcdefghij"]))

        result = await _task(llm).extract(PASSAGE, max_words=5)

        assert len(result.words) == 5
        assert result.confidence == 0.99

    @pytest.mark.asyncio
    async def test_prompt_carries_text_and_cap(self, llm_factory) -> None:
        """Should send the passage and the word cap to the model."""
        llm = llm_factory(ExtractedWords(words=["respiration"]))

        await _task(llm).extract(PASSAGE, max_words=7)

        messages = llm.with_structured_output.return_value.ainvoke.call_args.args[0]
        assert "up to 7" in messages[0].content
        assert messages[-1].content == PASSAGE
        llm.with_structured_output.assert_called_once_with(ExtractedWords)

    @pytest.mark.asyncio
    async def test_regex_fallback_when_nothing_usable(self, llm_factory) -> None:
        """Should fall back to regex extraction when all words are filtered."""
        llm = llm_factory(ExtractedWords(words=["the", "and", "12"]))

        result = await _task(llm).extract(PASSAGE, max_words=3)

        assert result.words == ["mitochondria", "produce", "energy"]
        assert result.used_fallback is True
        assert result.confidence == 0.7

    @pytest.mark.asyncio
    async def test_retries_transient_errors(self, llm_factory) -> None:
        """Should retry and succeed after a transient failure."""
        llm = llm_factory(side_effect=[
            RuntimeError("503 unavailable"),
            ExtractedWords(words=["glucose"]),
        ])

        result = await _task(llm).extract(PASSAGE, max_words=10)

        assert result.words == ["glucose"]
        assert llm.with_structured_output.return_value.ainvoke.await_count == 2

    @pytest.mark.asyncio
    async def test_raises_after_exhausting_retries(self, llm_factory) -> None:
        """Should raise WordExtractionError once retries are used up."""
        llm = llm_factory(side_effect=RuntimeError("quota exceeded"))

        with pytest.raises(WordExtractionError) as exc_info:
            await _task(llm, max_retries=2).extract(PASSAGE, max_words=10)

        assert exc_info.value.stage == "extraction"
        assert "quota exceeded" in str(exc_info.value)
        assert llm.with_structured_output.return_value.ainvoke.await_count == 2

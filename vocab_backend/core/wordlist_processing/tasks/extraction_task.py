"""
Vocabulary extraction task using a Gemini chat model.

Asks the LLM for vocabulary words in a cleaned passage, normalizes and
filters the response, and falls back to regex extraction when nothing
usable comes back.

Dependencies: langchain_core, langchain_google_genai, tenacity
System role: Second per-chunk stage of wordlist processing
"""

import logging
import re

from langchain_core.language_models import BaseChatModel
from tenacity.wait import wait_base

from vocab_backend.core.exceptions import WordExtractionError
from vocab_backend.core.wordlist_processing.llm import (
    EXTRACTION_PROMPT,
    ExtractedWords,
    create_chat_model,
    llm_retrying,
)
from vocab_backend.core.wordlist_processing.models import ExtractionResult
from vocab_backend.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their",
    "what", "so", "up", "out", "if", "about", "who", "get", "which", "go",
    "me", "when", "make", "can", "like", "time", "no", "just", "him", "know",
    "take", "people", "into", "year", "your", "good", "some", "could", "them",
    "see", "other", "than", "then", "now", "look", "only", "come", "its", "over",
    "think", "also", "back", "after", "use", "two", "how", "our", "work",
    "first", "well", "way", "even", "new", "want", "because", "any", "these",
    "give", "day", "most", "us", "is", "was", "are", "been", "has", "had",
    "were", "said", "did", "having", "may", "should", "am", "being",
})

MIN_WORD_LENGTH = 3
MAX_SAMPLE_CHARS = 20000

_FALLBACK_WORD_PATTERN = re.compile(r"\b[a-z]{3,15}\b", re.I)
_ALPHABETIC_PATTERN = re.compile(r"^[a-z]+$")


def clean_word_line(line: str) -> str:
    """
    Strip numbering, bullets, markdown and punctuation from an LLM line.

    Args:
        line: Raw line or list entry from the model

    Returns:
        str: Cleaned text (may be empty)
    """
    cleaned = re.sub(r"^\s*\d+[.)\-:\s]+", "", line)
    cleaned = re.sub(r"^\s*[•\-*+>]+\s*", "", cleaned)
    cleaned = re.sub(r"[*_`]", "", cleaned)
    cleaned = re.sub(r"[()\[\]]", "", cleaned)
    cleaned = re.sub(r"[^\w\s]", "", cleaned)
    return cleaned.strip()


def normalize_candidate(raw: str) -> str | None:
    """Return the first usable lowercase word of a candidate, if any."""
    cleaned = clean_word_line(raw).lower()
    if not cleaned:
        return None

    if _ALPHABETIC_PATTERN.match(cleaned):
        return cleaned

    for token in cleaned.split():
        letters = re.sub(r"[^a-z]", "", token)
        if len(letters) >= MIN_WORD_LENGTH:
            return letters

    return None


def sample_text(text: str, max_chars: int = MAX_SAMPLE_CHARS) -> tuple[str, bool]:
    """
    Sample long text from its beginning (40%), middle (30%) and end (30%).

    Args:
        text: Cleaned passage
        max_chars: Character budget

    Returns:
        tuple[str, bool]: Sampled text and whether sampling was applied
    """
    if len(text) <= max_chars:
        return text, False

    begin_chars = int(max_chars * 0.4)
    middle_chars = int(max_chars * 0.3)
    end_chars = max_chars - begin_chars - middle_chars

    middle_start = (len(text) - middle_chars) // 2
    beginning = text[:begin_chars]
    middle = text[middle_start:middle_start + middle_chars]
    end = text[-end_chars:]

    return f"{beginning}\n...\n{middle}\n...\n{end}", True


def fallback_extraction(text: str, max_words: int) -> list[str]:
    """
    Extract words by regex when the LLM response yields nothing.

    Args:
        text: Passage to scan
        max_words: Maximum words returned

    Returns:
        list[str]: Unique lowercase non-stop-words of 3-15 letters, in text order
    """
    seen: set[str] = set()
    words: list[str] = []

    for match in _FALLBACK_WORD_PATTERN.finditer(text):
        word = match.group(0).lower()
        if word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        words.append(word)
        if len(words) >= max_words:
            break

    return words


def filter_words(raw_words: list[str], max_words: int) -> list[str]:
    """Drop short words, stop words and duplicates, then cap the list."""
    seen: set[str] = set()
    filtered: list[str] = []

    for word in raw_words:
        if len(word) < MIN_WORD_LENGTH or word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        filtered.append(word)

    return filtered[:max_words]


class ExtractionTask:
    """Extract vocabulary words from cleaned text with an LLM."""

    def __init__(
        self,
        llm: BaseChatModel | None = None,
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.3,
        max_retries: int = 3,
        retry_wait: wait_base | None = None,
    ) -> None:
        """
        Initialize extraction task.

        Args:
            llm: Chat model (created from model_id if None)
            model_id: Gemini model identifier
            temperature: Sampling temperature
            max_retries: Attempts per LLM call
            retry_wait: Tenacity wait strategy override
        """
        llm = llm or create_chat_model(model_id, temperature)
        self._structured_llm = llm.with_structured_output(ExtractedWords)
        self._max_retries = max_retries
        self._retry_wait = retry_wait

    async def extract(self, cleaned_text: str, max_words: int) -> ExtractionResult:
        """
        Extract up to max_words vocabulary words.

        Args:
            cleaned_text: Output of the cleaning stage
            max_words: Maximum words to return

        Returns:
            ExtractionResult: Words, confidence and whether fallback was used

        Raises:
            WordExtractionError: When the LLM call keeps failing
        """
        text, was_sampled = sample_text(cleaned_text)
        if was_sampled:
            logger.info(
                f"{__name__}:extract - Sampled text {len(cleaned_text)} -> {len(text)} chars"
            )

        messages = EXTRACTION_PROMPT.invoke({"max_words": max_words, "text": text}).to_messages()

        try:
            async for attempt in llm_retrying("extract", self._max_retries, self._retry_wait):
                with attempt:
                    response: ExtractedWords = await self._structured_llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:extract - LLM extraction failed: {e}")
            raise WordExtractionError(f"Failed to extract words: {e}", stage="extraction") from e

        logger.debug(f"{__name__}:extract - Raw words: {safe_log_value(', '.join(response.words))}")

        raw_words = [word for word in map(normalize_candidate, response.words) if word]
        final_words = filter_words(raw_words, max_words)

        if not final_words:
            logger.warning(f"{__name__}:extract - LLM yielded no usable words, using regex fallback")
            final_words = fallback_extraction(text, max_words)
            return ExtractionResult(words=final_words, confidence=0.7, used_fallback=True)

        ratio = len(final_words) / min(len(raw_words) or 1, max_words)
        confidence = max(0.85, min(0.99, ratio))

        logger.info(
            f"{__name__}:extract - Extracted {len(final_words)}/{max_words} words "
            f"(filtered {len(raw_words) - len(final_words)})"
        )
        return ExtractionResult(words=final_words, confidence=confidence)

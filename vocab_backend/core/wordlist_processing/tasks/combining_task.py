"""
Wordlist combining task.

Merges per-chunk word pairs into a single deduplicated wordlist bounded by
a maximum word count. Chunks are merged in position order and the first
occurrence of a word wins.

Dependencies: wordlist_processing.models, core.exceptions
System role: Final stage of wordlist processing (fan-in of chunk results)
"""

from collections.abc import Iterable, Mapping
from typing import Any

from vocab_backend.core.exceptions import (
    InvalidConfigurationError,
    StrategyNotImplementedError,
    WordlistProcessingError,
)
from vocab_backend.core.wordlist_processing.models import (
    ChunkWordlist,
    CombinedWordlist,
    CombineMetadata,
    CombineOptions,
    PriorityStrategy,
    WordPair,
)

MIN_WORDS = 10
MAX_WORDS = 50

_SOURCE_FIELDS = ("source", "en")
_TARGET_FIELDS = ("target", "zh")


def _read_field(candidate: Any, names: tuple[str, ...]) -> Any:
    """Return the first present field among ``names`` or None."""
    for name in names:
        if isinstance(candidate, Mapping):
            if name in candidate:
                return candidate[name]
        elif hasattr(candidate, name):
            return getattr(candidate, name)
    return None


def is_valid_word_pair(candidate: Any) -> bool:
    """
    Check that a candidate carries non-blank string source and target text.

    Args:
        candidate: WordPair, mapping or arbitrary object

    Returns:
        bool: True only for pairs whose trimmed source and target are non-empty
    """
    if candidate is None or isinstance(candidate, (str, bytes)):
        return False

    source = _read_field(candidate, _SOURCE_FIELDS)
    target = _read_field(candidate, _TARGET_FIELDS)

    return (
        isinstance(source, str)
        and isinstance(target, str)
        and len(source.strip()) > 0
        and len(target.strip()) > 0
    )


def _to_word_pair(candidate: Any) -> WordPair:
    if isinstance(candidate, WordPair):
        return candidate
    return WordPair(
        source=_read_field(candidate, _SOURCE_FIELDS),
        target=_read_field(candidate, _TARGET_FIELDS),
    )


def sanitize_chunk_results(
    chunk_results: Iterable[ChunkWordlist | Mapping[str, Any]],
) -> list[ChunkWordlist]:
    """
    Drop malformed word pairs from every chunk, preserving order.

    Chunks left without words are kept; the combiner counts them as failed.
    A raw mapping without an id is named after its index (``chunk-<index>``).

    Args:
        chunk_results: ChunkWordlist models or raw mappings with
            chunk_id/position/words keys

    Returns:
        list[ChunkWordlist]: New chunk wordlists holding only valid pairs

    Raises:
        WordlistProcessingError: A raw mapping has no position
    """
    sanitized: list[ChunkWordlist] = []
    for index, chunk in enumerate(chunk_results):
        if isinstance(chunk, ChunkWordlist):
            chunk_id, position, words = chunk.chunk_id, chunk.position, chunk.words
        else:
            chunk_id = chunk.get("chunk_id", chunk.get("chunkId"))
            if chunk_id is None:
                chunk_id = f"chunk-{index}"

            position = chunk.get("position")
            if position is None:
                raise WordlistProcessingError(
                    f"Chunk result {chunk_id} has no position",
                    code="INVALID_CHUNK_RESULT",
                    details={"chunk_id": str(chunk_id), "index": index},
                )
            words = chunk.get("words") or []

        sanitized.append(
            ChunkWordlist(
                chunk_id=str(chunk_id),
                position=position,
                words=[_to_word_pair(word) for word in words if is_valid_word_pair(word)],
            )
        )
    return sanitized


def validate_combine_options(max_words: int, priority_strategy: PriorityStrategy | str) -> PriorityStrategy:
    """
    Validate combiner options.

    Args:
        max_words: Requested word cap
        priority_strategy: Strategy name or enum member

    Returns:
        PriorityStrategy: Normalized strategy

    Raises:
        InvalidConfigurationError: max_words outside [10, 50] or unknown strategy
        StrategyNotImplementedError: Reserved strategy selected
    """
    if isinstance(max_words, bool) or not isinstance(max_words, int) or not MIN_WORDS <= max_words <= MAX_WORDS:
        raise InvalidConfigurationError(
            f"Invalid maxWords: {max_words}. Must be between {MIN_WORDS} and {MAX_WORDS}.",
            field="max_words",
            value=max_words,
        )

    try:
        strategy = PriorityStrategy(priority_strategy)
    except ValueError as e:
        raise InvalidConfigurationError(
            f"Unknown priority strategy: {priority_strategy}",
            field="priority_strategy",
            value=priority_strategy,
        ) from e

    if strategy is not PriorityStrategy.FIRST_CHUNK:
        raise StrategyNotImplementedError(strategy.value)

    return strategy


def combine_wordlists(
    chunk_results: Iterable[ChunkWordlist],
    max_words: int,
    priority_strategy: PriorityStrategy | str = PriorityStrategy.FIRST_CHUNK,
) -> CombinedWordlist:
    """
    Combine chunk wordlists into one deduplicated list of at most max_words.

    Chunks are walked in ascending position (stable for equal positions),
    words in their original order. A word whose lower-cased, trimmed source
    was already seen counts as a duplicate. Traversal stops as soon as the
    cap is reached; later entries are not examined. Empty input returns a
    zeroed result before the options are checked.

    Args:
        chunk_results: Chunk wordlists, usually sanitized first
        max_words: Word cap, 10-50 inclusive
        priority_strategy: Only ``first-chunk`` is implemented

    Returns:
        CombinedWordlist: Words plus merge metadata

    Raises:
        InvalidConfigurationError: max_words out of range
        StrategyNotImplementedError: Reserved strategy selected
    """
    chunks = list(chunk_results)
    if not chunks:
        return CombinedWordlist()

    validate_combine_options(max_words, priority_strategy)

    sorted_chunks = sorted(chunks, key=lambda chunk: chunk.position)
    successful_chunks = [chunk for chunk in sorted_chunks if chunk.words]

    seen: set[str] = set()
    combined: list[WordPair] = []
    duplicates_removed = 0

    for chunk in successful_chunks:
        for pair in chunk.words:
            key = pair.dedup_key
            if key in seen:
                duplicates_removed += 1
                continue

            seen.add(key)
            combined.append(WordPair(source=pair.source.strip(), target=pair.target.strip()))
            if len(combined) >= max_words:
                break

        if len(combined) >= max_words:
            break

    return CombinedWordlist(
        words=combined,
        metadata=CombineMetadata(
            total_chunks_processed=len(chunks),
            successful_chunks=len(successful_chunks),
            failed_chunks=len(chunks) - len(successful_chunks),
            duplicates_removed=duplicates_removed,
            words_before_limit=len(combined) + duplicates_removed,
            words_after_limit=len(combined),
        ),
    )


class CombiningTask:
    """Sanitize and combine chunk wordlists with fixed options."""

    def __init__(self, options: CombineOptions) -> None:
        """
        Initialize combining task.

        Args:
            options: Word cap and priority strategy

        Raises:
            InvalidConfigurationError: Options out of range
            StrategyNotImplementedError: Reserved strategy selected
        """
        validate_combine_options(options.max_words, options.priority_strategy)
        self._options = options

    @property
    def options(self) -> CombineOptions:
        return self._options

    def combine(
        self,
        chunk_results: Iterable[ChunkWordlist | Mapping[str, Any]],
    ) -> CombinedWordlist:
        """
        Sanitize chunk results, then combine them.

        Args:
            chunk_results: Raw or typed chunk wordlists

        Returns:
            CombinedWordlist: Combined words with metadata

        Raises:
            WordlistProcessingError: A raw chunk result has no position
        """
        return combine_wordlists(
            sanitize_chunk_results(chunk_results),
            max_words=self._options.max_words,
            priority_strategy=self._options.priority_strategy,
        )

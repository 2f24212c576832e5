"""
Document chunking task.

Splits document text into chunks near a target size, preferring paragraph,
then sentence, then word boundaries, with a fixed overlap between
consecutive chunks.

Dependencies: re (stdlib), wordlist_processing.models
System role: Second stage of wordlist processing
"""

import re

from vocab_backend.core.exceptions import ChunkingError
from vocab_backend.core.wordlist_processing.models import (
    ChunkingMetadata,
    ChunkingResult,
    DocumentChunk,
)

# Characters searched on each side of the ideal split point
SEARCH_WINDOW = 1000

_PARAGRAPH_PATTERN = re.compile(r"\n\s*\n")
_SENTENCE_PATTERN = re.compile(r"[.!?]\s")


def _nearest_match(
    pattern: re.Pattern[str],
    text: str,
    search_start: int,
    search_end: int,
    ideal_point: int,
) -> int:
    """Return the end offset of the match closest to ideal_point, or -1."""
    best_match = -1
    best_distance = None

    for match in pattern.finditer(text, search_start, search_end):
        distance = abs(match.end() - ideal_point)
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best_match = match.end()

    return best_match


def _word_boundary(text: str, search_start: int, search_end: int, ideal_point: int) -> int:
    for i in range(min(ideal_point, len(text) - 1), search_start - 1, -1):
        if text[i].isspace():
            return i + 1

    for i in range(ideal_point, min(search_end, len(text))):
        if text[i].isspace():
            return i + 1

    return -1


def find_split_point(text: str, start_index: int, target_size: int, max_size: int) -> int:
    """
    Find the best offset to end a chunk starting at start_index.

    Args:
        text: Full document text
        start_index: Offset where the chunk begins
        target_size: Preferred chunk length
        max_size: Hard upper bound on chunk length

    Returns:
        int: Exclusive end offset of the chunk
    """
    ideal_split = start_index + target_size
    max_split = min(start_index + max_size, len(text))

    if max_split >= len(text):
        return len(text)

    search_start = max(start_index, ideal_split - SEARCH_WINDOW)
    search_end = min(max_split, ideal_split + SEARCH_WINDOW)

    for pattern in (_PARAGRAPH_PATTERN, _SENTENCE_PATTERN):
        boundary = _nearest_match(pattern, text, search_start, search_end, ideal_split)
        if boundary != -1:
            return boundary

    boundary = _word_boundary(text, search_start, search_end, ideal_split)
    if boundary != -1:
        return boundary

    return ideal_split


class ChunkingTask:
    """Split document text into overlapping chunks."""

    def __init__(
        self,
        target_size: int = 8000,
        max_size: int = 10000,
        min_size: int = 2000,
        overlap_size: int = 200,
    ) -> None:
        """
        Initialize chunking task with size configuration.

        Args:
            target_size: Preferred characters per chunk
            max_size: Maximum characters per chunk
            min_size: A final chunk shorter than this is merged into the previous one
            overlap_size: Overlap between consecutive chunks
        """
        self._target_size = target_size
        self._max_size = max_size
        self._min_size = min_size
        self._overlap_size = overlap_size

    def chunk(self, text: str) -> ChunkingResult:
        """
        Split text into chunks.

        Args:
            text: Raw document text

        Returns:
            ChunkingResult: Chunks with offsets into the trimmed text plus metadata

        Raises:
            ChunkingError: When text is empty or whitespace only
        """
        if not text or not text.strip():
            raise ChunkingError("Document contains no extractable text")

        trimmed = text.strip()

        if len(trimmed) <= self._target_size:
            chunk = DocumentChunk(
                id="chunk-1",
                text=trimmed,
                start_index=0,
                end_index=len(trimmed),
                position=1,
                total_chunks=1,
            )
            return ChunkingResult(
                chunks=[chunk],
                metadata=ChunkingMetadata(
                    original_length=len(trimmed),
                    total_chunks=1,
                    average_chunk_size=len(trimmed),
                ),
            )

        chunks: list[DocumentChunk] = []
        current_index = 0
        position = 1

        while current_index < len(trimmed):
            if len(trimmed) - current_index <= self._max_size:
                chunks.append(self._make_chunk(trimmed, current_index, len(trimmed), position))
                break

            split_point = find_split_point(trimmed, current_index, self._target_size, self._max_size)
            chunks.append(self._make_chunk(trimmed, current_index, split_point, position))

            current_index = max(current_index + 1, split_point - self._overlap_size)
            position += 1

        # Merge a too-small final chunk into its predecessor
        if len(chunks) > 1 and len(chunks[-1].text) < self._min_size:
            last = chunks.pop()
            previous = chunks[-1]
            chunks[-1] = self._make_chunk(trimmed, previous.start_index, last.end_index, previous.position)

        total_chunks = len(chunks)
        for chunk in chunks:
            chunk.total_chunks = total_chunks

        total_size = sum(len(chunk.text) for chunk in chunks)

        return ChunkingResult(
            chunks=chunks,
            metadata=ChunkingMetadata(
                original_length=len(trimmed),
                total_chunks=total_chunks,
                average_chunk_size=int(total_size / total_chunks + 0.5),
            ),
        )

    @staticmethod
    def _make_chunk(text: str, start: int, end: int, position: int) -> DocumentChunk:
        return DocumentChunk(
            id=f"chunk-{position}",
            text=text[start:end],
            start_index=start,
            end_index=end,
            position=position,
        )

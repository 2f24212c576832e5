"""
Combiner configuration and result models.

Dependencies: pydantic
System role: Input options and output contract of the wordlist combiner
"""

from enum import Enum

from pydantic import BaseModel, Field

from .word_pair import WordPair


class PriorityStrategy(str, Enum):
    """Ordering used when merging chunk wordlists."""

    FIRST_CHUNK = "first-chunk"
    # Reserved: declared upstream but without defined semantics.
    FREQUENCY = "frequency"
    RANDOM = "random"


class CombineOptions(BaseModel):
    """Options for combining chunk wordlists.

    Range checks on ``max_words`` are enforced by the combiner so that
    callers get an InvalidConfigurationError rather than a pydantic error.
    """

    max_words: int = Field(description="Maximum words in the combined list (10-50)")
    priority_strategy: PriorityStrategy = Field(
        default=PriorityStrategy.FIRST_CHUNK,
        description="Merge ordering strategy",
    )


class CombineMetadata(BaseModel):
    """Merge statistics reported alongside the combined wordlist."""

    total_chunks_processed: int = 0
    successful_chunks: int = 0
    failed_chunks: int = 0
    duplicates_removed: int = 0
    words_before_limit: int = 0
    words_after_limit: int = 0


class CombinedWordlist(BaseModel):
    """Deduplicated, size-bounded wordlist with merge metadata."""

    words: list[WordPair] = Field(default_factory=list)
    metadata: CombineMetadata = Field(default_factory=CombineMetadata)

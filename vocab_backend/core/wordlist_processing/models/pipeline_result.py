"""
Pipeline result model for wordlist processing.

Represents the outcome of processing a document into a wordlist.

Dependencies: pydantic
System role: Return type for WordlistPipeline.process()
"""

from pydantic import BaseModel, Field

from .combined_wordlist import CombineMetadata
from .word_pair import WordPair


class ChunkProgress(BaseModel):
    """Status of a single chunk after processing."""

    chunk_id: str
    position: int
    total_chunks: int
    status: str = Field(description="completed or failed")
    words_extracted: int = 0
    error: str | None = None


class WordlistChunkingSummary(BaseModel):
    """Chunk-level statistics for a processed document."""

    total_chunks: int
    successful_chunks: int
    failed_chunks: int
    average_chunk_size: int
    duplicates_removed: int


class PipelineResult(BaseModel):
    """Result of wordlist pipeline execution."""

    document_id: str = Field(description="Unique document identifier")
    words: list[WordPair] = Field(description="Combined, deduplicated wordlist")
    word_count: int = Field(description="Number of words in the combined list")
    combine_metadata: CombineMetadata
    chunking: WordlistChunkingSummary
    chunk_progress: list[ChunkProgress] = Field(default_factory=list)
    total_tokens: int = Field(default=0, description="Estimated LLM tokens across chunks")
    stage_timings_ms: dict[str, float] = Field(default_factory=dict)
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
    warning: str | None = Field(default=None, description="Set on partial chunk failure")

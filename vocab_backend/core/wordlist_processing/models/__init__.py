"""
Models for wordlist processing pipeline.

Exports: WordPair, ChunkWordlist, combiner options/results, document chunks,
per-chunk results and PipelineResult
"""

from .chunk_result import (
    ChunkError,
    ChunkMetrics,
    ChunkProcessingResult,
    CleanedText,
    ExtractionResult,
    ProcessingStage,
    TranslationResult,
)
from .combined_wordlist import (
    CombinedWordlist,
    CombineMetadata,
    CombineOptions,
    PriorityStrategy,
)
from .document_chunk import ChunkingMetadata, ChunkingResult, DocumentChunk
from .pipeline_result import ChunkProgress, PipelineResult, WordlistChunkingSummary
from .word_pair import ChunkWordlist, WordPair

__all__ = [
    "WordPair",
    "ChunkWordlist",
    "PriorityStrategy",
    "CombineOptions",
    "CombineMetadata",
    "CombinedWordlist",
    "DocumentChunk",
    "ChunkingMetadata",
    "ChunkingResult",
    "ProcessingStage",
    "CleanedText",
    "ExtractionResult",
    "TranslationResult",
    "ChunkError",
    "ChunkMetrics",
    "ChunkProcessingResult",
    "ChunkProgress",
    "WordlistChunkingSummary",
    "PipelineResult",
]

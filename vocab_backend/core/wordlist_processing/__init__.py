"""
Wordlist processing pipeline.

Parses a document, splits it into chunks, extracts and translates vocabulary
per chunk, then merges the per-chunk wordlists into one capped list.

Dependencies: langchain_community, langchain_google_genai, tenacity, pydantic
System role: Document-to-wordlist pipeline entrypoint
"""

from .configs import (
    WordlistPipelineSettings,
    get_pipeline_settings,
)
from .entrypoint import WordlistPipeline
from .models import (
    ChunkWordlist,
    CombinedWordlist,
    CombineMetadata,
    CombineOptions,
    PipelineResult,
    PriorityStrategy,
    WordPair,
)
from .tasks import (
    CombiningTask,
    combine_wordlists,
    is_valid_word_pair,
    sanitize_chunk_results,
)

__all__ = [
    "WordlistPipeline",
    "WordlistPipelineSettings",
    "get_pipeline_settings",
    "CombiningTask",
    "combine_wordlists",
    "is_valid_word_pair",
    "sanitize_chunk_results",
    "WordPair",
    "ChunkWordlist",
    "CombineOptions",
    "CombineMetadata",
    "CombinedWordlist",
    "PriorityStrategy",
    "PipelineResult",
]

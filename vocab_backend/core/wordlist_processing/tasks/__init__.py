"""
Task modules for wordlist processing pipeline.

Exports: ParsingTask, ChunkingTask, CleaningTask, ExtractionTask,
TranslationTask, CombiningTask and the combiner functions
"""

from .chunking_task import ChunkingTask
from .cleaning_task import CleaningTask
from .combining_task import (
    CombiningTask,
    combine_wordlists,
    is_valid_word_pair,
    sanitize_chunk_results,
)
from .extraction_task import ExtractionTask
from .parsing_task import ParsingTask, document_type_for
from .translation_task import TranslationTask

__all__ = [
    "ParsingTask",
    "document_type_for",
    "ChunkingTask",
    "CleaningTask",
    "ExtractionTask",
    "TranslationTask",
    "CombiningTask",
    "combine_wordlists",
    "is_valid_word_pair",
    "sanitize_chunk_results",
]

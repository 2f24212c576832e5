"""
Core business logic module.

Contains the exception hierarchy and the wordlist processing pipeline.
"""

from vocab_backend.core.exceptions import (
    VocabBackendException,
    InvalidConfigurationError,
    StrategyNotImplementedError,
    DocumentProcessingError,
    ParsingError,
    ChunkingError,
    WordExtractionError,
    WordlistProcessingError,
)

__all__ = [
    "VocabBackendException",
    "InvalidConfigurationError",
    "StrategyNotImplementedError",
    "DocumentProcessingError",
    "ParsingError",
    "ChunkingError",
    "WordExtractionError",
    "WordlistProcessingError",
]

"""
Concurrent chunk processing for wordlist extraction.

Exports: ChunkProcessor, estimate_token_usage
"""

from .chunk_processor import ChunkProcessor, estimate_token_usage

__all__ = ["ChunkProcessor", "estimate_token_usage"]

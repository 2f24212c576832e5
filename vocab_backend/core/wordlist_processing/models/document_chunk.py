"""
Document chunk models for wordlist processing.

Represents a slice of document text with its character offsets.

Dependencies: pydantic
System role: Output of the chunking stage, input of chunk processing
"""

from pydantic import BaseModel, Field


class DocumentChunk(BaseModel):
    """Contiguous slice of the (trimmed) document text."""

    id: str = Field(description="Chunk identifier, e.g. chunk-1")
    text: str = Field(description="Chunk text content")
    start_index: int = Field(description="Start offset in the trimmed document")
    end_index: int = Field(description="End offset (exclusive) in the trimmed document")
    position: int = Field(description="1-based chunk number")
    total_chunks: int = Field(default=0, description="Number of chunks in the document")


class ChunkingMetadata(BaseModel):
    """Summary of a chunking run."""

    original_length: int
    total_chunks: int
    average_chunk_size: int


class ChunkingResult(BaseModel):
    """Chunks produced for one document."""

    chunks: list[DocumentChunk]
    metadata: ChunkingMetadata

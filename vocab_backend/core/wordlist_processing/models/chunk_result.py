"""
Per-stage and per-chunk result models.

Cleaning, extraction and translation each return a small result model;
ChunkProcessingResult aggregates them for one chunk, success or failure.

Dependencies: pydantic
System role: Contracts between chunk processing stages
"""

from enum import Enum

from pydantic import BaseModel, Field

from .word_pair import WordPair


class ProcessingStage(str, Enum):
    """Stage at which chunk processing failed."""

    CLEANING = "cleaning"
    EXTRACTION = "extraction"
    TRANSLATION = "translation"


class CleanedText(BaseModel):
    """Output of the text cleaning stage."""

    cleaned_text: str
    cleanliness_score: float = Field(ge=0.0, le=1.0)
    removed_sections: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)


class ExtractionResult(BaseModel):
    """Output of the word extraction stage."""

    words: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.95, ge=0.0, le=1.0)
    used_fallback: bool = False


class TranslationResult(BaseModel):
    """Output of the translation stage."""

    translations: list[WordPair] = Field(default_factory=list)
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    fallback_used: list[str] = Field(default_factory=list)


class ChunkError(BaseModel):
    """Failure description for a chunk."""

    code: str = Field(description="CHUNK_* failure code")
    message: str
    stage: ProcessingStage


class ChunkMetrics(BaseModel):
    """Timing and token accounting for a chunk."""

    cleaning_time_ms: float = 0.0
    extraction_time_ms: float = 0.0
    translation_time_ms: float = 0.0
    tokens_used: int = 0


class ChunkProcessingResult(BaseModel):
    """Outcome of processing one chunk through clean, extract and translate."""

    chunk_id: str
    success: bool
    words: list[WordPair] = Field(default_factory=list)
    error: ChunkError | None = None
    metrics: ChunkMetrics = Field(default_factory=ChunkMetrics)
    cleaning_confidence: float | None = Field(default=None, description="Set on success")
    extraction_confidence: float | None = Field(default=None, description="Set on success")
    used_fallback_extraction: bool = Field(
        default=False, description="Words came from the regex fallback instead of the LLM"
    )
    translation_confidence: float | None = Field(default=None, description="Set on success")
    untranslated_words: list[str] = Field(
        default_factory=list, description="Words the translation stage mapped to themselves"
    )

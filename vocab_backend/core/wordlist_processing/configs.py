"""
Configuration settings for wordlist processing pipeline.

Provides environment-based configuration for chunking, concurrent chunk
processing, LLM calls, combining and performance warning thresholds.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class WordlistPipelineSettings(BaseSettings):
    """Settings for the document-to-wordlist pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="WORDLIST_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Feature flags
    enable_chunking: bool = Field(
        default=True,
        description="Split large documents into chunks before extraction",
    )
    enable_concurrent_processing: bool = Field(
        default=True,
        description="Process several chunks at once",
    )

    # Chunking settings
    target_size: int = Field(default=8000, ge=1000, le=50000, description="Target characters per chunk")
    max_size: int = Field(default=10000, ge=1000, le=100000, description="Maximum characters per chunk")
    min_size: int = Field(default=2000, ge=500, le=10000, description="Minimum size of the final chunk")
    overlap_size: int = Field(default=200, ge=0, le=1000, description="Overlap between consecutive chunks")
    threshold: int = Field(
        default=8000,
        ge=1000,
        le=50000,
        description="Documents longer than this are chunked",
    )

    # Processing settings
    max_concurrent_chunks: int = Field(default=3, ge=1, le=10, description="Chunks processed per batch")
    chunk_timeout_ms: int = Field(default=30000, ge=5000, le=120000, description="Timeout per chunk")
    max_words_per_chunk: int = Field(default=50, ge=10, le=100, description="Words extracted per chunk")
    max_words: int = Field(default=40, ge=10, le=50, description="Word cap of the combined wordlist")

    # Performance thresholds
    processing_warning_ms: int = Field(default=10000, ge=1000, le=60000)
    token_usage_warning_threshold: int = Field(default=5000, ge=1000, le=20000)
    total_token_warning_threshold: int = Field(default=50000, ge=10000, le=200000)

    # LLM settings
    llm_model_id: str = Field(
        default="gemini-2.5-flash",
        description="Google Gemini chat model used for extraction and translation",
    )
    llm_max_retries: int = Field(default=3, ge=1, le=10, description="Attempts per LLM call")

    @model_validator(mode="after")
    def _check_consistency(self) -> "WordlistPipelineSettings":
        errors: list[str] = []

        if self.target_size > self.max_size:
            errors.append(f"target_size ({self.target_size}) cannot exceed max_size ({self.max_size})")
        if self.min_size > self.target_size:
            errors.append(f"min_size ({self.min_size}) cannot exceed target_size ({self.target_size})")
        if self.overlap_size >= self.min_size:
            errors.append(f"overlap_size ({self.overlap_size}) must be less than min_size ({self.min_size})")

        if errors:
            raise ValueError("Invalid chunking configuration: " + "; ".join(errors))

        if self.threshold < self.target_size:
            logger.warning(
                f"{__name__}:_check_consistency - threshold ({self.threshold}) is less than "
                f"target_size ({self.target_size}); documents between these sizes will be "
                f"chunked unnecessarily"
            )

        if not self.enable_concurrent_processing and self.max_concurrent_chunks > 1:
            logger.warning(
                f"{__name__}:_check_consistency - Concurrent processing is disabled but "
                f"max_concurrent_chunks is {self.max_concurrent_chunks}. Setting to 1."
            )
            self.max_concurrent_chunks = 1

        return self

    def summary(self) -> str:
        """Render the configuration for logging."""
        return "\n".join([
            "Chunking Configuration:",
            "  Feature Flags:",
            f"    - Chunking: {'enabled' if self.enable_chunking else 'disabled'}",
            f"    - Concurrent Processing: {'enabled' if self.enable_concurrent_processing else 'disabled'}",
            "  Chunking:",
            f"    - Target Size: {self.target_size} chars",
            f"    - Max Size: {self.max_size} chars",
            f"    - Min Size: {self.min_size} chars",
            f"    - Overlap: {self.overlap_size} chars",
            f"    - Threshold: {self.threshold} chars",
            "  Processing:",
            f"    - Max Concurrent: {self.max_concurrent_chunks} chunks",
            f"    - Timeout: {self.chunk_timeout_ms}ms",
            f"    - Max Words/Chunk: {self.max_words_per_chunk}",
            f"    - Max Words: {self.max_words}",
            "  Thresholds:",
            f"    - Processing Warning: {self.processing_warning_ms}ms",
            f"    - Token Warning: {self.token_usage_warning_threshold}",
            f"    - Total Token Warning: {self.total_token_warning_threshold}",
        ])


@lru_cache
def get_pipeline_settings() -> WordlistPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        WordlistPipelineSettings: Singleton settings loaded from environment
    """
    settings = WordlistPipelineSettings()
    logger.info(f"{__name__}:get_pipeline_settings - {settings.summary()}")
    return settings

"""
Chunk processor for wordlist extraction.

Runs one document chunk through clean -> extract -> translate. Each stage
is isolated: failures and timeouts become a failed ChunkProcessingResult
instead of an exception, so one bad chunk never sinks the document.

Dependencies: asyncio, wordlist_processing.tasks
System role: Per-chunk unit of work fanned out by WordlistPipeline
"""

import asyncio
import logging
import math
import time

from vocab_backend.core.wordlist_processing.configs import (
    WordlistPipelineSettings,
    get_pipeline_settings,
)
from vocab_backend.core.wordlist_processing.models import (
    ChunkError,
    ChunkMetrics,
    ChunkProcessingResult,
    DocumentChunk,
    ProcessingStage,
)
from vocab_backend.core.wordlist_processing.tasks import (
    CleaningTask,
    ExtractionTask,
    TranslationTask,
)
from vocab_backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Leading characters of the cleaned chunk passed to the translator
TRANSLATION_CONTEXT_CHARS = 500


def estimate_token_usage(text_length: int, word_count: int) -> int:
    """
    Estimate LLM tokens for one chunk.

    Extraction costs roughly one token per four input characters plus two per
    word returned; translation roughly twenty per word pair.

    Args:
        text_length: Characters of cleaned text
        word_count: Words extracted

    Returns:
        int: Estimated tokens
    """
    extraction_tokens = math.ceil(text_length / 4) + word_count * 2
    translation_tokens = word_count * 20
    return extraction_tokens + translation_tokens


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _failure(
    chunk_id: str,
    code: str,
    message: str,
    stage: ProcessingStage,
    metrics: ChunkMetrics,
) -> ChunkProcessingResult:
    return ChunkProcessingResult(
        chunk_id=chunk_id,
        success=False,
        error=ChunkError(code=code, message=message, stage=stage),
        metrics=metrics,
    )


class ChunkProcessor:
    """Process document chunks through cleaning, extraction and translation."""

    def __init__(
        self,
        extraction_task: ExtractionTask,
        translation_task: TranslationTask,
        cleaning_task: CleaningTask | None = None,
        settings: WordlistPipelineSettings | None = None,
    ) -> None:
        """
        Initialize chunk processor.

        Args:
            extraction_task: LLM word extraction stage
            translation_task: LLM translation stage
            cleaning_task: Text cleaning stage (default CleaningTask)
            settings: Pipeline settings (uses defaults if None)
        """
        self._extraction_task = extraction_task
        self._translation_task = translation_task
        self._cleaning_task = cleaning_task or CleaningTask()
        self._settings = settings or get_pipeline_settings()

    async def process_chunk(
        self,
        chunk: DocumentChunk,
        document_type: str,
        max_words_per_chunk: int | None = None,
        timeout_ms: int | None = None,
    ) -> ChunkProcessingResult:
        """
        Process a single chunk. Never raises.

        Args:
            chunk: Document chunk
            document_type: pdf, docx, xlsx or txt, forwarded to the cleaner
            max_words_per_chunk: Extraction cap (settings default if None)
            timeout_ms: Whole-chunk timeout (settings default if None)

        Returns:
            ChunkProcessingResult: Word pairs on success, error details otherwise
        """
        max_words = max_words_per_chunk or self._settings.max_words_per_chunk
        timeout = timeout_ms or self._settings.chunk_timeout_ms
        metrics = ChunkMetrics()

        logger.info(f"{__name__}:process_chunk - Starting {chunk.id} ({len(chunk.text)} chars)")

        try:
            return await asyncio.wait_for(
                self._process(chunk, document_type, max_words, metrics),
                timeout=timeout / 1000,
            )
        except asyncio.TimeoutError:
            logger.error(f"{__name__}:process_chunk - {chunk.id}: Timeout after {timeout}ms")
            return _failure(
                chunk.id,
                "CHUNK_TIMEOUT",
                f"Processing timeout after {timeout}ms",
                ProcessingStage.EXTRACTION,
                ChunkMetrics(),
            )
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(
                logger,
                f"{__name__}:process_chunk - Unexpected error",
                e,
                chunk_id=chunk.id,
            )
            return _failure(
                chunk.id,
                "CHUNK_PROCESSING_ERROR",
                str(e) or "Unknown error",
                ProcessingStage.EXTRACTION,
                metrics,
            )

    async def _process(
        self,
        chunk: DocumentChunk,
        document_type: str,
        max_words: int,
        metrics: ChunkMetrics,
    ) -> ChunkProcessingResult:
        chunk_id = chunk.id

        # Stage 1: cleaning
        start = time.perf_counter()
        try:
            cleaned = self._cleaning_task.clean(chunk.text, document_type)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(f"{__name__}:_process - {chunk_id}: Cleaning failed: {e}")
            return _failure(chunk_id, "CHUNK_CLEANING_FAILED", str(e) or "Cleaning failed",
                            ProcessingStage.CLEANING, metrics)
        metrics.cleaning_time_ms = _elapsed_ms(start)

        cleaned_text = cleaned.cleaned_text
        if not cleaned_text.strip():
            logger.warning(f"{__name__}:_process - {chunk_id}: Cleaning produced empty text")
            return _failure(chunk_id, "CHUNK_CLEANING_FAILED", "Cleaning produced empty text",
                            ProcessingStage.CLEANING, metrics)

        # Stage 2: extraction
        start = time.perf_counter()
        try:
            extraction = await self._extraction_task.extract(cleaned_text, max_words)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(f"{__name__}:_process - {chunk_id}: Extraction failed: {e}")
            return _failure(chunk_id, "CHUNK_EXTRACTION_FAILED", str(e) or "Extraction failed",
                            ProcessingStage.EXTRACTION, metrics)
        metrics.extraction_time_ms = _elapsed_ms(start)

        if not extraction.words:
            logger.warning(f"{__name__}:_process - {chunk_id}: Extraction produced no words")
            return _failure(chunk_id, "CHUNK_EXTRACTION_FAILED", "No words extracted from chunk",
                            ProcessingStage.EXTRACTION, metrics)

        # Stage 3: translation
        start = time.perf_counter()
        try:
            translation = await self._translation_task.translate(
                extraction.words,
                context=cleaned_text[:TRANSLATION_CONTEXT_CHARS],
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.error(f"{__name__}:_process - {chunk_id}: Translation failed: {e}")
            return _failure(chunk_id, "CHUNK_TRANSLATION_FAILED", str(e) or "Translation failed",
                            ProcessingStage.TRANSLATION, metrics)
        metrics.translation_time_ms = _elapsed_ms(start)

        if not translation.translations:
            logger.warning(f"{__name__}:_process - {chunk_id}: Translation produced no results")
            return _failure(chunk_id, "CHUNK_TRANSLATION_FAILED", "Translation produced no results",
                            ProcessingStage.TRANSLATION, metrics)

        if extraction.used_fallback or translation.fallback_used:
            logger.warning(
                f"{__name__}:_process - {chunk_id}: Fallback used "
                f"(extraction: {extraction.used_fallback}, untranslated: {len(translation.fallback_used)})"
            )

        metrics.tokens_used = estimate_token_usage(len(cleaned_text), len(extraction.words))
        self._warn_on_thresholds(chunk_id, metrics)

        logger.info(
            f"{__name__}:_process - {chunk_id}: Completed with {len(translation.translations)} pairs "
            f"(cleaning {metrics.cleaning_time_ms:.0f}ms, extraction {metrics.extraction_time_ms:.0f}ms, "
            f"translation {metrics.translation_time_ms:.0f}ms, tokens {metrics.tokens_used})"
        )

        return ChunkProcessingResult(
            chunk_id=chunk_id,
            success=True,
            words=translation.translations,
            metrics=metrics,
            cleaning_confidence=cleaned.confidence,
            extraction_confidence=extraction.confidence,
            used_fallback_extraction=extraction.used_fallback,
            translation_confidence=translation.confidence,
            untranslated_words=translation.fallback_used,
        )

    def _warn_on_thresholds(self, chunk_id: str, metrics: ChunkMetrics) -> None:
        warning_ms = self._settings.processing_warning_ms
        token_threshold = self._settings.token_usage_warning_threshold

        if metrics.extraction_time_ms > warning_ms:
            logger.warning(
                f"{__name__}:_warn_on_thresholds - {chunk_id}: Extraction took "
                f"{metrics.extraction_time_ms:.0f}ms (>{warning_ms}ms threshold)"
            )
        if metrics.translation_time_ms > warning_ms:
            logger.warning(
                f"{__name__}:_warn_on_thresholds - {chunk_id}: Translation took "
                f"{metrics.translation_time_ms:.0f}ms (>{warning_ms}ms threshold)"
            )
        if metrics.tokens_used > token_threshold:
            logger.warning(
                f"{__name__}:_warn_on_thresholds - {chunk_id}: High token usage: "
                f"{metrics.tokens_used} tokens (>{token_threshold} threshold)"
            )

"""
Wordlist pipeline orchestrator.

Coordinates parsing, chunking, concurrent per-chunk processing and the
final wordlist combination.

Dependencies: All task modules, ChunkProcessor, configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
import uuid

from langchain_core.language_models import BaseChatModel

from vocab_backend.core.exceptions import WordlistProcessingError
from vocab_backend.core.wordlist_processing.configs import (
    WordlistPipelineSettings,
    get_pipeline_settings,
)
from vocab_backend.core.wordlist_processing.models import (
    ChunkError,
    ChunkingMetadata,
    ChunkingResult,
    ChunkProcessingResult,
    ChunkProgress,
    ChunkWordlist,
    CombineOptions,
    DocumentChunk,
    PipelineResult,
    ProcessingStage,
    WordlistChunkingSummary,
)
from vocab_backend.core.wordlist_processing.processing import ChunkProcessor
from vocab_backend.core.wordlist_processing.tasks import (
    ChunkingTask,
    CombiningTask,
    ExtractionTask,
    ParsingTask,
    TranslationTask,
    document_type_for,
)

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class WordlistPipeline:
    """Orchestrate wordlist extraction: parse -> chunk -> process chunks -> combine."""

    def __init__(
        self,
        settings: WordlistPipelineSettings | None = None,
        llm: BaseChatModel | None = None,
        extraction_task: ExtractionTask | None = None,
        translation_task: TranslationTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            settings: Pipeline settings (uses defaults if None)
            llm: Chat model shared by extraction and translation (Gemini if None)
            extraction_task: Override for the extraction stage
            translation_task: Override for the translation stage
        """
        self._settings = settings or get_pipeline_settings()

        self._parsing_task = ParsingTask()
        self._chunking_task = ChunkingTask(
            target_size=self._settings.target_size,
            max_size=self._settings.max_size,
            min_size=self._settings.min_size,
            overlap_size=self._settings.overlap_size,
        )
        self._chunk_processor = ChunkProcessor(
            extraction_task=extraction_task or ExtractionTask(
                llm=llm,
                model_id=self._settings.llm_model_id,
                max_retries=self._settings.llm_max_retries,
            ),
            translation_task=translation_task or TranslationTask(
                llm=llm,
                model_id=self._settings.llm_model_id,
                max_retries=self._settings.llm_max_retries,
            ),
            settings=self._settings,
        )

    async def process(
        self,
        file_path: str | None = None,
        text: str | None = None,
        document_type: str | None = None,
        document_id: str | None = None,
        max_words: int | None = None,
    ) -> PipelineResult:
        """
        Process a document into a combined wordlist.

        Accepts either a local file_path OR raw text.

        Args:
            file_path: Path to a PDF or text document (mutually exclusive with text)
            text: Raw document text (mutually exclusive with file_path)
            document_type: pdf or txt; derived from file_path when omitted
            document_id: Optional document ID (generated if None)
            max_words: Word cap for the combined list (settings default if None)

        Returns:
            PipelineResult: Combined wordlist with chunk and merge statistics

        Raises:
            ValueError: Neither or both of file_path and text provided
            InvalidConfigurationError: max_words outside [10, 50]
            ParsingError: Document parsing failed
            ChunkingError: Document has no text
            WordlistProcessingError: Every chunk failed or no words survived
        """
        if (file_path is None) == (text is None):
            raise ValueError("Exactly one of file_path or text must be provided")

        combining_task = CombiningTask(CombineOptions(
            max_words=self._settings.max_words if max_words is None else max_words
        ))

        start_time = time.perf_counter()
        doc_id = document_id or str(uuid.uuid4())
        stages: dict[str, float] = {}

        if file_path is not None:
            stage_start = time.perf_counter()
            document_type = document_type or document_type_for(file_path)
            text = self._parsing_task.parse(file_path)
            stages["parsing"] = _elapsed_ms(stage_start)
        document_type = document_type or "txt"

        stage_start = time.perf_counter()
        chunking = self._chunk(text)
        stages["chunking"] = _elapsed_ms(stage_start)
        chunks = chunking.chunks
        logger.info(
            f"{__name__}:process - Document {doc_id}: {len(chunks)} chunks "
            f"(avg size {chunking.metadata.average_chunk_size} chars)"
        )

        stage_start = time.perf_counter()
        results = await self._process_chunks(chunks, document_type)
        stages["processing"] = _elapsed_ms(stage_start)

        progress = [
            ChunkProgress(
                chunk_id=chunk.id,
                position=chunk.position,
                total_chunks=len(chunks),
                status="completed" if result.success else "failed",
                words_extracted=len(result.words),
                error=result.error.message if result.error else None,
            )
            for chunk, result in zip(chunks, results)
        ]

        total_tokens = sum(result.metrics.tokens_used for result in results)
        if total_tokens > self._settings.total_token_warning_threshold:
            logger.warning(
                f"{__name__}:process - High total token usage: {total_tokens} tokens "
                f"(>{self._settings.total_token_warning_threshold} threshold)"
            )

        successful = [(chunk, result) for chunk, result in zip(chunks, results) if result.success]
        failed_count = len(chunks) - len(successful)

        if not successful:
            first_error = results[0].error.message if results and results[0].error else "Unknown error"
            logger.error(f"{__name__}:process - All {len(chunks)} chunks failed for {doc_id}")
            raise WordlistProcessingError(
                f"All {len(chunks)} chunks failed to process. First error: {first_error}",
                code="ALL_CHUNKS_FAILED",
                document_id=doc_id,
            )

        stage_start = time.perf_counter()
        combined = combining_task.combine(
            ChunkWordlist(chunk_id=chunk.id, position=chunk.position, words=result.words)
            for chunk, result in successful
        )
        stages["combining"] = _elapsed_ms(stage_start)
        logger.info(
            f"{__name__}:process - Combined {len(combined.words)} words "
            f"(removed {combined.metadata.duplicates_removed} duplicates)"
        )

        if not combined.words:
            raise WordlistProcessingError(
                "No words could be extracted from any chunk",
                code="NO_WORDS_EXTRACTED",
                document_id=doc_id,
            )

        warning = None
        if failed_count:
            warning = f"{len(successful)} of {len(chunks)} sections processed successfully"
            logger.warning(f"{__name__}:process - {warning}")

        return PipelineResult(
            document_id=doc_id,
            words=combined.words,
            word_count=len(combined.words),
            combine_metadata=combined.metadata,
            chunking=WordlistChunkingSummary(
                total_chunks=len(chunks),
                successful_chunks=len(successful),
                failed_chunks=failed_count,
                average_chunk_size=chunking.metadata.average_chunk_size,
                duplicates_removed=combined.metadata.duplicates_removed,
            ),
            chunk_progress=progress,
            total_tokens=total_tokens,
            stage_timings_ms=stages,
            processing_time_ms=_elapsed_ms(start_time),
            warning=warning,
        )

    def process_sync(self, **kwargs) -> PipelineResult:
        """Run process() in a fresh event loop."""
        return asyncio.run(self.process(**kwargs))

    def _chunk(self, text: str) -> ChunkingResult:
        trimmed = text.strip()
        if self._settings.enable_chunking and len(trimmed) > self._settings.threshold:
            return self._chunking_task.chunk(text)

        if not trimmed:
            # Delegates the empty-document error
            return self._chunking_task.chunk(text)

        return ChunkingResult(
            chunks=[
                DocumentChunk(
                    id="chunk-1",
                    text=trimmed,
                    start_index=0,
                    end_index=len(trimmed),
                    position=1,
                    total_chunks=1,
                )
            ],
            metadata=ChunkingMetadata(
                original_length=len(trimmed),
                total_chunks=1,
                average_chunk_size=len(trimmed),
            ),
        )

    async def _process_chunks(
        self,
        chunks: list[DocumentChunk],
        document_type: str,
    ) -> list[ChunkProcessingResult]:
        batch_size = self._settings.max_concurrent_chunks
        results: list[ChunkProcessingResult] = []

        for i in range(0, len(chunks), batch_size):
            batch = chunks[i:i + batch_size]
            logger.info(
                f"{__name__}:_process_chunks - Batch {i // batch_size + 1} "
                f"(chunks {i + 1}-{i + len(batch)} of {len(chunks)})"
            )

            outcomes = await asyncio.gather(
                *(self._chunk_processor.process_chunk(chunk, document_type) for chunk in batch),
                return_exceptions=True,
            )

            for chunk, outcome in zip(batch, outcomes):
                if isinstance(outcome, BaseException):
                    logger.error(f"{__name__}:_process_chunks - {chunk.id} raised: {outcome}")
                    outcome = ChunkProcessingResult(
                        chunk_id=chunk.id,
                        success=False,
                        error=ChunkError(
                            code="CHUNK_PROCESSING_ERROR",
                            message=str(outcome) or "Unknown error",
                            stage=ProcessingStage.EXTRACTION,
                        ),
                    )
                results.append(outcome)

        return results

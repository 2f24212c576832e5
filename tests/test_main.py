"""Tests for the command-line entry point."""

import json
from unittest.mock import patch

import pytest

from vocab_backend.core.exceptions import ParsingError
from vocab_backend.core.wordlist_processing.models import (
    CombineMetadata,
    PipelineResult,
    WordlistChunkingSummary,
    WordPair,
)
from vocab_backend.main import build_parser, main


@pytest.fixture
def pipeline_result() -> PipelineResult:
    return PipelineResult(
        document_id="doc-1",
        words=[WordPair(source="cat", target="猫"), WordPair(source="dog", target="狗")],
        word_count=2,
        combine_metadata=CombineMetadata(
            total_chunks_processed=1,
            successful_chunks=1,
            words_before_limit=2,
            words_after_limit=2,
        ),
        chunking=WordlistChunkingSummary(
            total_chunks=1,
            successful_chunks=1,
            failed_chunks=0,
            average_chunk_size=40,
            duplicates_removed=0,
        ),
        processing_time_ms=12.5,
    )


class TestMain:
    """Test main()."""

    @patch("vocab_backend.main.WordlistPipeline")
    @patch("vocab_backend.main.configure_logging")
    def test_configures_logging_before_running(
        self, mock_configure, mock_pipeline_cls, pipeline_result, capsys
    ) -> None:
        """Should configure logging at startup and print the wordlist as JSON."""
        mock_pipeline_cls.return_value.process_sync.return_value = pipeline_result

        exit_code = main(["lesson.pdf", "--max-words", "20", "--log-level", "DEBUG"])

        assert exit_code == 0
        mock_configure.assert_called_once_with("DEBUG")
        mock_pipeline_cls.return_value.process_sync.assert_called_once_with(
            file_path="lesson.pdf",
            document_id=None,
            max_words=20,
        )
        payload = json.loads(capsys.readouterr().out)
        assert payload["document_id"] == "doc-1"
        assert payload["words"] == [{"en": "cat", "zh": "猫"}, {"en": "dog", "zh": "狗"}]
        assert payload["metadata"]["words_after_limit"] == 2

    @patch("vocab_backend.main.WordlistPipeline")
    @patch("vocab_backend.main.configure_logging")
    def test_processing_error_exits_non_zero(self, mock_configure, mock_pipeline_cls, capsys) -> None:
        """Should return 1 and print nothing when the pipeline fails."""
        mock_pipeline_cls.return_value.process_sync.side_effect = ParsingError("File not found: gone.pdf")

        exit_code = main(["gone.pdf"])

        assert exit_code == 1
        mock_configure.assert_called_once_with("INFO")
        assert capsys.readouterr().out == ""


class TestBuildParser:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        """Should leave the word cap to settings by default."""
        args = build_parser().parse_args(["notes.txt"])

        assert args.max_words is None
        assert args.document_id is None
        assert args.log_level == "INFO"

    def test_rejects_unknown_log_level(self) -> None:
        """Should exit on a log level outside the choices."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["notes.txt", "--log-level", "LOUD"])

"""Tests for logging configuration and helpers."""

import logging
import sys
from unittest.mock import MagicMock

import pytest

from vocab_backend.observability import (
    configure_logging,
    get_logger,
    log_exception_with_context,
    safe_log_value,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_installs_single_stdout_handler(self, restore_root_logger) -> None:
        """Replaces existing handlers with one stdout handler."""
        configure_logging()
        configure_logging(logging.DEBUG)

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stdout
        assert restore_root_logger.level == logging.DEBUG

    def test_accepts_level_name(self, restore_root_logger) -> None:
        """Accepts a level name as given on the command line."""
        configure_logging("WARNING")

        assert restore_root_logger.level == logging.WARNING

    def test_quiets_noisy_libraries(self, restore_root_logger) -> None:
        """Raises third-party logger levels."""
        configure_logging()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("pypdf").level == logging.ERROR

    def test_get_logger(self) -> None:
        """Returns the named logger."""
        assert get_logger("vocab_backend.test").name == "vocab_backend.test"


class TestSafeLogValue:
    """Tests for safe_log_value."""

    def test_none(self) -> None:
        assert safe_log_value(None) == "None"

    def test_sequences_summarized(self) -> None:
        """Lists and dicts are reduced to their size."""
        assert safe_log_value(["a", "b", "c"]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_strings_truncated(self) -> None:
        """Strings beyond max_length are cut with a marker."""
        value = safe_log_value("x" * 20, max_length=5)

        assert value == "xxxxx... (truncated, 20 total)"

    def test_unrepresentable_value(self) -> None:
        """Objects whose __str__ fails do not raise."""
        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("nope")

        assert safe_log_value(Broken()) == "<unable to log: RuntimeError>"


class TestLogExceptionWithContext:
    """Tests for log_exception_with_context."""

    def test_logs_error_with_context(self) -> None:
        """Passes exception info and sanitized context to logger.error."""
        logger = MagicMock()
        exc = ValueError("bad chunk")

        log_exception_with_context(logger, "Chunk failed", exc, chunk_id="chunk-1", words=["a", "b"])

        logger.error.assert_called_once()
        args, kwargs = logger.error.call_args
        assert args == ("Chunk failed",)
        assert kwargs["exc_info"] is exc
        assert kwargs["extra"] == {
            "chunk_id": "chunk-1",
            "words": "list(2 items)",
            "error_type": "ValueError",
            "error_msg": "bad chunk",
        }

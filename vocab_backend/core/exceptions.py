"""
Exception hierarchy for the vocabulary backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class VocabBackendException(Exception):
    """Base exception for all vocabulary backend errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidConfigurationError(VocabBackendException):
    """Raised when a configuration value is outside its permitted range."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Name of the offending option
            value: Rejected value
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
            details["value"] = value
        self.field = field
        self.value = value
        super().__init__(message, details)


class StrategyNotImplementedError(VocabBackendException, NotImplementedError):
    """Raised when a reserved priority strategy is selected."""

    def __init__(self, strategy: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["strategy"] = strategy
        self.strategy = strategy
        super().__init__(f"Priority strategy not implemented: {strategy}", details)


class DocumentProcessingError(VocabBackendException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when document parsing fails."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            document_id: ID of the document
            file_type: Type of file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, document_id, details)


class ChunkingError(DocumentProcessingError):
    """Raised when document text cannot be split into chunks."""

    pass


class WordExtractionError(DocumentProcessingError):
    """Raised when an LLM-backed extraction or translation call fails."""

    def __init__(
        self,
        message: str,
        stage: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["stage"] = stage
        self.stage = stage
        super().__init__(message, document_id, details)


class WordlistProcessingError(DocumentProcessingError):
    """Raised when a document yields no usable wordlist."""

    def __init__(
        self,
        message: str,
        code: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize wordlist processing error.

        Args:
            message: Error message
            code: Machine-readable failure code (ALL_CHUNKS_FAILED, NO_WORDS_EXTRACTED,
                INVALID_CHUNK_RESULT)
            document_id: ID of the document
            details: Additional context
        """
        details = details or {}
        details["code"] = code
        self.code = code
        super().__init__(message, document_id, details)

"""
Command-line entry point.

Configures logging, runs the wordlist pipeline on one document and prints
the combined wordlist as JSON.

Dependencies: argparse, core.wordlist_processing, observability
System role: Application startup (logging is configured here only)
"""

import argparse
import json
import logging
import sys

from vocab_backend.core.exceptions import VocabBackendException
from vocab_backend.core.wordlist_processing import WordlistPipeline
from vocab_backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vocab-wordlist",
        description="Extract an English to Mandarin wordlist from a document.",
    )
    parser.add_argument("file", help="Path to a .pdf, .docx, .xlsx, .txt or .md document")
    parser.add_argument(
        "--max-words",
        type=int,
        default=None,
        help="Word cap (10-50); defaults to WORDLIST_PIPELINE_MAX_WORDS",
    )
    parser.add_argument("--document-id", default=None, help="Document id to report")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Root log level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the pipeline for the file named on the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv)

    Returns:
        int: Exit status, 0 on success and 1 on a processing error
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        result = WordlistPipeline().process_sync(
            file_path=args.file,
            document_id=args.document_id,
            max_words=args.max_words,
        )
    except VocabBackendException as e:
        logger.error(f"{__name__}:main - {e}")
        return 1

    if result.warning:
        logger.warning(f"{__name__}:main - {result.warning}")

    payload = {
        "document_id": result.document_id,
        "words": [pair.to_wire() for pair in result.words],
        "metadata": result.combine_metadata.model_dump(),
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

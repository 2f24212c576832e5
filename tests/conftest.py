"""
Shared test fixtures and configuration for entire test suite.

Provides: LLM doubles, pipeline settings, sample chunk wordlists
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from vocab_backend.core.wordlist_processing.configs import WordlistPipelineSettings
from vocab_backend.core.wordlist_processing.models import ChunkWordlist, WordPair


def make_structured_llm(response=None, side_effect=None) -> MagicMock:
    """
    Build a chat model double whose structured output returns ``response``.

    Args:
        response: Object returned by ``ainvoke``
        side_effect: Exception or sequence passed through to the AsyncMock

    Returns:
        MagicMock: Object usable as a BaseChatModel by the LLM tasks
    """
    llm = MagicMock()
    llm.with_structured_output.return_value.ainvoke = AsyncMock(
        return_value=response,
        side_effect=side_effect,
    )
    return llm


@pytest.fixture
def llm_factory():
    """Factory fixture building structured-output chat model doubles."""
    return make_structured_llm


@pytest.fixture
def pipeline_settings() -> WordlistPipelineSettings:
    """
    Create settings with small chunk sizes for fast tests.

    Returns:
        WordlistPipelineSettings: Test configuration
    """
    return WordlistPipelineSettings(
        target_size=1000,
        max_size=1500,
        min_size=500,
        overlap_size=100,
        threshold=1000,
        max_concurrent_chunks=2,
        chunk_timeout_ms=5000,
        max_words=10,
    )


@pytest.fixture
def animal_chunks() -> list[ChunkWordlist]:
    """Two chunks sharing the word cat, the second with a different case."""
    return [
        ChunkWordlist(
            chunk_id="chunk-1",
            position=0,
            words=[WordPair(en="cat", zh="猫"), WordPair(en="dog", zh="狗")],
        ),
        ChunkWordlist(
            chunk_id="chunk-2",
            position=1,
            words=[WordPair(en="CAT", zh="X"), WordPair(en="bird", zh="鸟")],
        ),
    ]

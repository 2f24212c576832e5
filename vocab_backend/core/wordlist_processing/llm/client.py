"""
Chat model factory and retry policy for vocabulary LLM calls.

Dependencies: langchain_google_genai, tenacity, python-dotenv
System role: Shared LLM access for extraction and translation tasks
"""

import logging

from dotenv import load_dotenv
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)
from tenacity.wait import wait_base

# GOOGLE_API_KEY may live in a local .env
load_dotenv()

logger = logging.getLogger(__name__)


def create_chat_model(model_id: str, temperature: float) -> BaseChatModel:
    """
    Create the Gemini chat model.

    Args:
        model_id: Gemini model identifier
        temperature: Sampling temperature

    Returns:
        BaseChatModel: Configured chat model (reads GOOGLE_API_KEY from env)
    """
    return ChatGoogleGenerativeAI(model=model_id, temperature=temperature)


def llm_retrying(
    operation: str,
    max_attempts: int = 3,
    wait: wait_base | None = None,
) -> AsyncRetrying:
    """
    Build a tenacity retry controller for an async LLM call.

    Args:
        operation: Name used in retry log lines
        max_attempts: Total attempts before the last error is re-raised
        wait: Wait strategy (exponential backoff with jitter by default)

    Returns:
        AsyncRetrying: Iterate with ``async for attempt in ...``
    """
    return AsyncRetrying(
        retry=retry_if_exception_type(Exception),
        stop=stop_after_attempt(max_attempts),
        wait=wait or wait_exponential_jitter(initial=1, max=30, jitter=5),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:{operation} - Retry {retry_state.attempt_number}/{max_attempts} "
            f"after error: {retry_state.outcome.exception()}"
        ),
        reraise=True,
    )

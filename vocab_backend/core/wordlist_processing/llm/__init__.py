"""
LLM access for wordlist processing.

Exports: create_chat_model, llm_retrying, prompt templates, output schemas
"""

from .client import create_chat_model, llm_retrying
from .prompts import EXTRACTION_PROMPT, TRANSLATION_PROMPT
from .schemas import ExtractedWords, TranslatedWord, TranslatedWords

__all__ = [
    "create_chat_model",
    "llm_retrying",
    "EXTRACTION_PROMPT",
    "TRANSLATION_PROMPT",
    "ExtractedWords",
    "TranslatedWord",
    "TranslatedWords",
]

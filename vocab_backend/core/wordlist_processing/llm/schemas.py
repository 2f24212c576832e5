"""
Structured output schemas for vocabulary LLM calls.

Dependencies: pydantic
System role: Response contracts for extraction and translation prompts
"""

from pydantic import BaseModel, Field


class ExtractedWords(BaseModel):
    """Vocabulary words selected from a passage."""

    words: list[str] = Field(
        default_factory=list,
        description="Lowercase base-form English words, one entry per word",
    )


class TranslatedWord(BaseModel):
    """Translation of a single English word."""

    source: str = Field(description="English word exactly as given in the input list")
    target: str = Field(description="Simplified Chinese translation")


class TranslatedWords(BaseModel):
    """Translations in the same order as the input words."""

    translations: list[TranslatedWord] = Field(default_factory=list)

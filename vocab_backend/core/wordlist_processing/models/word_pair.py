"""
Vocabulary word pair models.

A WordPair is one vocabulary entry (source word and its translation).
A ChunkWordlist holds the pairs produced for one document chunk.

Dependencies: pydantic
System role: Data structures consumed by the wordlist combiner
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class WordPair(BaseModel):
    """Immutable vocabulary entry.

    Accepts the upstream wire names ``en``/``zh`` as well as
    ``source``/``target``.
    """

    model_config = ConfigDict(frozen=True)

    source: str = Field(
        validation_alias=AliasChoices("source", "en"),
        description="Source-language word (e.g. English)",
    )
    target: str = Field(
        validation_alias=AliasChoices("target", "zh"),
        description="Translation of the source word (e.g. Mandarin)",
    )

    @property
    def dedup_key(self) -> str:
        """Case- and whitespace-insensitive identity of the source word."""
        return self.source.strip().lower()

    def to_wire(self) -> dict[str, str]:
        """Serialize using the upstream ``en``/``zh`` field names."""
        return {"en": self.source, "zh": self.target}


class ChunkWordlist(BaseModel):
    """Word pairs extracted from a single document chunk."""

    chunk_id: str = Field(description="Opaque chunk identifier (e.g. chunk-3)")
    position: int = Field(description="Merge priority, lower positions win ties")
    words: list[WordPair] = Field(
        default_factory=list,
        description="Extracted pairs in extraction order",
    )

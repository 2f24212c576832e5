"""
English-to-Mandarin translation task using a Gemini chat model.

Words the model fails to translate map to themselves so that every
extracted word still yields a pair.

Dependencies: langchain_core, langchain_google_genai, tenacity
System role: Third per-chunk stage of wordlist processing
"""

import logging
import re

from langchain_core.language_models import BaseChatModel
from tenacity.wait import wait_base

from vocab_backend.core.wordlist_processing.llm import (
    TRANSLATION_PROMPT,
    TranslatedWords,
    create_chat_model,
    llm_retrying,
)
from vocab_backend.core.wordlist_processing.models import TranslationResult, WordPair

logger = logging.getLogger(__name__)

MAX_CONTEXT_CHARS = 500

_CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")


class TranslationTask:
    """Translate extracted English words to simplified Chinese."""

    def __init__(
        self,
        llm: BaseChatModel | None = None,
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.2,
        max_retries: int = 3,
        retry_wait: wait_base | None = None,
    ) -> None:
        """
        Initialize translation task.

        Args:
            llm: Chat model (created from model_id if None)
            model_id: Gemini model identifier
            temperature: Sampling temperature, low for consistent translations
            max_retries: Attempts per LLM call
            retry_wait: Tenacity wait strategy override
        """
        llm = llm or create_chat_model(model_id, temperature)
        self._structured_llm = llm.with_structured_output(TranslatedWords)
        self._max_retries = max_retries
        self._retry_wait = retry_wait

    async def translate(self, words: list[str], context: str = "") -> TranslationResult:
        """
        Translate words, keeping input order.

        A translation is accepted only if its source matches the input word
        (case-insensitively) and its target contains Chinese characters.

        Args:
            words: English words
            context: Passage excerpt used to disambiguate polysemous words

        Returns:
            TranslationResult: One pair per input word plus fallback bookkeeping
        """
        if not words:
            return TranslationResult(translations=[], confidence=1.0, fallback_used=[])

        context_block = ""
        if context.strip():
            context_block = f"\n\nDocument context (for polysemous words):\n{context[:MAX_CONTEXT_CHARS]}"

        messages = TRANSLATION_PROMPT.invoke({
            "word_list": "\n".join(words),
            "context_block": context_block,
        }).to_messages()

        try:
            async for attempt in llm_retrying("translate", self._max_retries, self._retry_wait):
                with attempt:
                    response: TranslatedWords = await self._structured_llm.ainvoke(messages)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(f"{__name__}:translate - LLM translation failed, using fallback: {e}")
            return TranslationResult(
                translations=[WordPair(source=word, target=word) for word in words],
                confidence=0.5,
                fallback_used=list(words),
            )

        translated: dict[str, str] = {}
        for item in response.translations:
            key = item.source.strip().lower()
            target = item.target.strip()
            if key not in translated and _CJK_PATTERN.search(target):
                translated[key] = target

        translations: list[WordPair] = []
        fallback_used: list[str] = []
        for word in words:
            target = translated.get(word.strip().lower())
            if target is None:
                fallback_used.append(word)
                target = word
            translations.append(WordPair(source=word, target=target))

        success_rate = (len(translations) - len(fallback_used)) / len(translations)
        confidence = max(0.85, min(0.99, success_rate))

        if fallback_used:
            logger.warning(
                f"{__name__}:translate - {len(fallback_used)}/{len(words)} words fell back to source text"
            )

        return TranslationResult(
            translations=translations,
            confidence=confidence,
            fallback_used=fallback_used,
        )

"""
Prompt templates for vocabulary extraction and translation.

Dependencies: langchain_core.prompts
System role: Prompt definitions for the LLM-backed pipeline stages
"""

from langchain_core.prompts import ChatPromptTemplate

EXTRACTION_SYSTEM_PROMPT = """You select vocabulary words for language learners.

Extract up to {max_words} useful English vocabulary words from the passage.

Rules:
- lowercase, base form (e.g. "run" not "running")
- single words only, no phrases, numbers or bullets
- skip common function words (the, and, of, ...)
- prefer words a learner is unlikely to know already"""

EXTRACTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", EXTRACTION_SYSTEM_PROMPT),
    ("human", "{text}"),
])

TRANSLATION_SYSTEM_PROMPT = """You are an expert English-to-Mandarin translator specializing in vocabulary learning.

Rules:
1. Provide the most common and useful Mandarin translation for each word
2. For polysemous words, use the document context to pick the right meaning
3. Use simplified Chinese characters (简体中文)
4. For rare or specialized words, provide the best available translation
5. Keep the same order as the input words and copy each English word unchanged into the source field"""

TRANSLATION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", TRANSLATION_SYSTEM_PROMPT),
    ("human", """Translate these English words to Mandarin Chinese:

{word_list}{context_block}"""),
])

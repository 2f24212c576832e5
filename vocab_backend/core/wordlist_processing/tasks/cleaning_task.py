"""
Text cleaning task.

Removes document noise (page numbers, repeated headers and footers, tables
of contents, index entries, captions, URLs) with regular expressions and
line-frequency heuristics before words are extracted.

Dependencies: re (stdlib)
System role: First per-chunk stage of wordlist processing
"""

import re
from collections import Counter

from vocab_backend.core.wordlist_processing.models import CleanedText

_PAGE_NUMBER_PATTERNS = [
    re.compile(r"^\s*\d+\s*$", re.M),
    re.compile(r"^\s*-\s*\d+\s*-\s*$", re.M),
    re.compile(r"^\s*Page\s+\d+\s*$", re.M | re.I),
    re.compile(r"^\s*\[\d+\]\s*$", re.M),
    re.compile(r"^\s*\d+\s+of\s+\d+\s*$", re.M | re.I),
]

_TOC_PATTERNS = [
    re.compile(r"^.{3,}\.{3,}\s*\d+\s*$", re.M),
    re.compile(r"^.{3,}\s+\d+\s*$", re.M),
]

_INDEX_PATTERN = re.compile(
    r"^[A-Z][a-z]+(?:\s+[a-z]+)*,?\s+\d+(?:[-–]\d+)?(?:,\s*\d+(?:[-–]\d+)?)*\s*$",
    re.M,
)

_CAPTION_PATTERNS = [
    re.compile(r"^(?:Figure|Table|Image|Chart|Diagram)\s+\d+[:.]\s*.+$", re.M | re.I),
    re.compile(r"^(?:Fig\.|Tab\.)\s+\d+[:.]\s*.+$", re.M | re.I),
]

_URL_PATTERN = re.compile(r"https?://\S+")
_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Printable ASCII, newline, tab and CJK unified ideographs survive
_NON_PRINTABLE_PATTERN = re.compile(r"[^\x20-\x7E\n\t\u4e00-\u9fff]")

_MOJIBAKE_FIXES = {
    "â€™": "'",
    "â€œ": '"',
    "â€\x9d": '"',
    "â€”": "-",
    "â€“": "-",
}

# Lines repeated this often are treated as running headers or footers
HEADER_FOOTER_MIN_REPEATS = 3
HEADER_FOOTER_MAX_LENGTH = 100

# Document types whose URLs and e-mail addresses are stripped
URL_STRIPPED_TYPES = frozenset({"txt", "pdf"})


def _apply_patterns(text: str, patterns: list[re.Pattern[str]]) -> tuple[str, bool]:
    removed = False
    for pattern in patterns:
        text, count = pattern.subn("", text)
        removed = removed or count > 0
    return text, removed


class CleaningTask:
    """Clean raw chunk text with regex patterns and heuristics."""

    def clean(self, raw_text: str, document_type: str = "txt") -> CleanedText:
        """
        Clean text for vocabulary extraction.

        Args:
            raw_text: Text of a document chunk
            document_type: File type (txt, pdf, docx, xlsx); URLs are only removed for txt/pdf

        Returns:
            CleanedText: Cleaned text with cleanliness score and removed sections
        """
        removed_sections: list[str] = []
        text = raw_text

        text, removed = _apply_patterns(text, _PAGE_NUMBER_PATTERNS)
        if removed:
            removed_sections.append("page_numbers")

        text, removed = self._remove_headers_footers(text)
        if removed:
            removed_sections.append("headers_footers")

        text, removed = _apply_patterns(text, _TOC_PATTERNS)
        if removed:
            removed_sections.append("table_of_contents")

        text, removed = _apply_patterns(text, [_INDEX_PATTERN])
        if removed:
            removed_sections.append("indexes")

        text, removed = _apply_patterns(text, _CAPTION_PATTERNS)
        if removed:
            removed_sections.append("captions")

        if document_type in URL_STRIPPED_TYPES:
            text, removed = _apply_patterns(text, [_URL_PATTERN, _EMAIL_PATTERN])
            if removed:
                removed_sections.append("urls_emails")

        normalized = self._normalize_whitespace(text)
        if normalized != text:
            removed_sections.append("whitespace")
        text = normalized

        fixed = self._remove_special_characters(text)
        if fixed != text:
            removed_sections.append("special_characters")
        text = fixed

        original_length = len(raw_text)
        removal_ratio = 1 - len(text) / original_length if original_length > 0 else 0.0

        return CleanedText(
            cleaned_text=text,
            cleanliness_score=min(1.0, max(0.0, removal_ratio)),
            removed_sections=removed_sections,
            confidence=0.85 if removed_sections else 0.95,
        )

    @staticmethod
    def _remove_headers_footers(text: str) -> tuple[str, bool]:
        lines = text.split("\n")
        frequency = Counter(
            line.strip()
            for line in lines
            if 0 < len(line.strip()) < HEADER_FOOTER_MAX_LENGTH
        )
        repeated = {line for line, count in frequency.items() if count >= HEADER_FOOTER_MIN_REPEATS}

        if not repeated:
            return text, False

        filtered = [line for line in lines if line.strip() not in repeated]
        return "\n".join(filtered), len(filtered) < len(lines)

    @staticmethod
    def _normalize_whitespace(text: str) -> str:
        text = re.sub(r"\n{3,}", "\n\n", text)
        text = re.sub(r" {2,}", " ", text)
        text = "\n".join(line.strip() for line in text.split("\n"))
        return text.strip()

    @staticmethod
    def _remove_special_characters(text: str) -> str:
        for broken, fixed in _MOJIBAKE_FIXES.items():
            text = text.replace(broken, fixed)
        return _NON_PRINTABLE_PATTERN.sub("", text)

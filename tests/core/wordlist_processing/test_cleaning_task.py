"""Tests for chunk text cleaning."""

import pytest

from vocab_backend.core.wordlist_processing.tasks import CleaningTask


@pytest.fixture
def cleaner() -> CleaningTask:
    return CleaningTask()


class TestCleaningTask:
    """Test CleaningTask.clean."""

    def test_clean_text_untouched(self, cleaner: CleaningTask) -> None:
        """Should leave noise-free text as is with high confidence."""
        text = "The cat sat on the mat.\nIt was happy."

        result = cleaner.clean(text)

        assert result.cleaned_text == text
        assert result.removed_sections == []
        assert result.confidence == 0.95
        assert result.cleanliness_score == 0.0

    def test_removes_page_numbers(self, cleaner: CleaningTask) -> None:
        """Should drop standalone page number lines."""
        text = "Introduction text here\n12\nMore content follows\nPage 3\n- 4 -"

        result = cleaner.clean(text)

        assert "12" not in result.cleaned_text
        assert "Page 3" not in result.cleaned_text
        assert "- 4 -" not in result.cleaned_text
        assert "Introduction text here" in result.cleaned_text
        assert result.removed_sections[0] == "page_numbers"
        assert result.confidence == 0.85

    def test_removes_repeated_headers(self, cleaner: CleaningTask) -> None:
        """Should drop short lines repeated at least three times."""
        text = "\n".join([
            "Biology Handbook",
            "Cells divide by mitosis.",
            "Biology Handbook",
            "Plants photosynthesize sunlight.",
            "Biology Handbook",
            "Animals breathe oxygen.",
        ])

        result = cleaner.clean(text)

        assert "Biology Handbook" not in result.cleaned_text
        assert "Cells divide by mitosis." in result.cleaned_text
        assert "headers_footers" in result.removed_sections

    def test_lines_repeated_twice_kept(self, cleaner: CleaningTask) -> None:
        """Should keep lines seen fewer than three times."""
        text = "Summary\nFirst idea.\nSummary\nSecond idea."

        result = cleaner.clean(text)

        assert result.cleaned_text.count("Summary") == 2

    def test_removes_captions(self, cleaner: CleaningTask) -> None:
        """Should drop figure and table captions."""
        text = "Figure 1: A diagram of a cell\nThe nucleus controls the cell.\nTable 2. Results overview"

        result = cleaner.clean(text)

        assert result.cleaned_text == "The nucleus controls the cell."
        assert "captions" in result.removed_sections

    def test_removes_urls_for_text_documents(self, cleaner: CleaningTask) -> None:
        """Should strip URLs and e-mail addresses from txt and pdf."""
        text = "Visit https://example.com/page for details.\nWrite to tutor@school.org today."

        result = cleaner.clean(text, "pdf")

        assert "https://" not in result.cleaned_text
        assert "@" not in result.cleaned_text
        assert "urls_emails" in result.removed_sections

    def test_keeps_urls_for_other_documents(self, cleaner: CleaningTask) -> None:
        """Should leave URLs in docx text."""
        text = "Visit https://example.com/page for details."

        result = cleaner.clean(text, "docx")

        assert "https://example.com/page" in result.cleaned_text

    def test_normalizes_whitespace(self, cleaner: CleaningTask) -> None:
        """Should collapse runs of spaces and blank lines."""
        text = "  Too   many    spaces  \n\n\n\n\nNext paragraph."

        result = cleaner.clean(text)

        assert result.cleaned_text == "Too many spaces\n\nNext paragraph."
        assert "whitespace" in result.removed_sections

    def test_fixes_mojibake_and_strips_non_printable(self, cleaner: CleaningTask) -> None:
        """Should repair smart quotes and drop non-ASCII non-CJK characters."""
        text = "Itâ€™s a café.\n猫 means cat."

        result = cleaner.clean(text)

        assert result.cleaned_text == "It's a caf.\n猫 means cat."
        assert "special_characters" in result.removed_sections

    def test_cleanliness_score_reflects_removed_share(self, cleaner: CleaningTask) -> None:
        """Should report the share of characters removed."""
        text = "Keep this sentence.\n1\n2\n3"

        result = cleaner.clean(text)

        expected = 1 - len(result.cleaned_text) / len(text)
        assert result.cleanliness_score == pytest.approx(expected)
        assert 0.0 < result.cleanliness_score < 1.0

"""Tests for DOCX export functionality."""

from pathlib import Path

import pytest
from docx import Document

from src.export.docx_generator import (
    ensure_output_directory,
    export_review_to_docx,
    generate_timestamped_filename,
)
from src.models.quiz import Quiz
from src.session.results import QuizResult


@pytest.fixture
def played_result(sample_quiz: Quiz) -> QuizResult:
    """One right, one wrong, one unanswered."""
    return QuizResult.from_answers(sample_quiz, ["4", "150,000,000 m/s", ""])


def document_text(path: str) -> str:
    return "\n".join(paragraph.text for paragraph in Document(path).paragraphs)


class TestEnsureOutputDirectory:
    """Test output directory creation."""

    def test_creates_directory_if_not_exists(self, tmp_path):
        """Test that directory is created if it doesn't exist."""
        output_dir = tmp_path / "test_output"
        result = ensure_output_directory(str(output_dir))

        assert output_dir.is_dir()
        assert result == output_dir

    def test_does_not_fail_if_directory_exists(self, tmp_path):
        """Test that function works if directory already exists."""
        output_dir = tmp_path / "test_output"
        output_dir.mkdir()

        assert ensure_output_directory(str(output_dir)) == output_dir


class TestGenerateTimestampedFilename:
    """Test timestamped filename generation."""

    def test_format(self):
        """Test the stem, timestamp and extension."""
        filename = generate_timestamped_filename("review")

        assert filename.startswith("review_")
        assert filename.endswith(".docx")
        # review_YYYYMMDD_HHMMSS.docx
        assert len(filename) == len("review_") + 15 + len(".docx")

    def test_drops_directory_and_extension(self):
        """Test that only the stem of the base name is used."""
        filename = generate_timestamped_filename("some/dir/review.docx", "txt")
        assert filename.startswith("review_")
        assert filename.endswith(".txt")


class TestExportReviewToDocx:
    """Test the review export."""

    def test_creates_file(self, tmp_path, played_result: QuizResult):
        """Test that the file is written where asked."""
        output = tmp_path / "review.docx"

        path = export_review_to_docx(played_result, str(output))

        assert path == str(output)
        assert output.exists()

    def test_adds_suffix_and_parent_dirs(self, tmp_path, played_result: QuizResult):
        """Test a path without an extension in a missing directory."""
        path = export_review_to_docx(played_result, str(tmp_path / "nested" / "review"))

        assert path.endswith(".docx")
        assert Path(path).exists()

    def test_output_dir_mode(self, tmp_path, played_result: QuizResult):
        """Test writing a timestamped file into an output directory."""
        path = export_review_to_docx(
            played_result,
            "review",
            use_output_dir=True,
            output_dir=str(tmp_path / "exports"),
        )

        assert Path(path).parent == tmp_path / "exports"
        assert Path(path).name.startswith("review_")
        assert Path(path).exists()

    def test_contains_score_and_review(self, tmp_path, played_result: QuizResult):
        """Test the summary and the marked answers."""
        text = document_text(export_review_to_docx(played_result, str(tmp_path / "r.docx")))

        assert "General Knowledge" in text
        assert "You scored 1 out of 3 (33%)" in text
        assert "Review Your Answers" in text
        assert "Q1. What is 2 + 2?" in text
        assert "B. 4 (Correct)" in text
        assert "C. 150,000,000 m/s (Your answer)" in text
        assert "Scored 1/1 (Correct)" in text
        assert "Scored 0/1 (Wrong)" in text
        assert "Scored 0/1 (Unanswered)" in text
        assert "Explanation: George Orwell wrote" in text

    def test_correct_answer_not_marked_as_user_answer(
        self, tmp_path, played_result: QuizResult
    ):
        """Test that a right answer is only marked correct."""
        text = document_text(export_review_to_docx(played_result, str(tmp_path / "r.docx")))
        assert "B. 4 (Correct) (Your answer)" not in text
        assert text.count("(Your answer)") == 1

"""DOCX export of a played quiz with score and answer review."""

from datetime import datetime
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from src.session.results import QuestionReview, QuizResult

GREEN = RGBColor(0, 128, 0)
RED = RGBColor(192, 0, 0)
GREY = RGBColor(96, 96, 96)
NAVY = RGBColor(0, 51, 102)


def ensure_output_directory(output_dir: str = "output") -> Path:
    """
    Ensure the output directory exists.

    Args:
        output_dir: Directory path to create

    Returns:
        Path object for the output directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def generate_timestamped_filename(base_name: str, extension: str = "docx") -> str:
    """
    Generate a filename with timestamp.

    Args:
        base_name: Base name for the file (any directory part is dropped)
        extension: File extension (without dot)

    Returns:
        Filename with timestamp
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    stem = Path(base_name).stem
    return f"{stem}_{timestamp}.{extension}"


def export_review_to_docx(
    result: QuizResult,
    output_path: str,
    use_output_dir: bool = False,
    output_dir: str = "output",
) -> str:
    """
    Export a finished quiz to DOCX: score summary, then every question with
    the user's answer, the correct answer and the explanation.

    Args:
        result: The scored quiz
        output_path: File to write (a ".docx" suffix is added if missing)
        use_output_dir: If True, write a timestamped file inside output_dir instead
        output_dir: Directory for timestamped files

    Returns:
        Path to the created DOCX file
    """
    if use_output_dir:
        directory = ensure_output_directory(output_dir)
        path = directory / generate_timestamped_filename(output_path)
    else:
        path = Path(output_path)
        if path.suffix.lower() != ".docx":
            path = path.with_suffix(".docx")
        path.parent.mkdir(parents=True, exist_ok=True)

    doc = Document()
    setup_document_styles(doc)

    add_summary(doc, result)
    doc.add_page_break()

    heading = doc.add_heading("Review Your Answers", level=1)
    heading.runs[0].font.color.rgb = NAVY

    for review in result.review():
        add_question_review(doc, review)

    doc.save(str(path))
    return str(path)


def setup_document_styles(doc: Document) -> None:
    """
    Set up document-wide styles.

    Args:
        doc: Document to configure
    """
    font = doc.styles["Normal"].font
    font.name = "Calibri"
    font.size = Pt(11)

    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)


def add_summary(doc: Document, result: QuizResult) -> None:
    """Add the title block and score."""
    quiz = result.quiz
    title = doc.add_heading(quiz.title, level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    score_para = doc.add_paragraph()
    score_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    score_run = score_para.add_run(
        f"You scored {result.score} out of {result.total} ({result.percentage}%)"
    )
    score_run.bold = True
    score_run.font.size = Pt(14)

    meta = quiz.metadata
    info_para = doc.add_paragraph()
    info_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    info_para.add_run(f"Language: {meta.language}").italic = True
    if meta.difficulty:
        info_para.add_run("  |  ")
        info_para.add_run(f"Difficulty: {meta.difficulty.value}").italic = True

    date_para = doc.add_paragraph(f"Generated: {meta.created_at.strftime('%Y-%m-%d %H:%M')}")
    date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    date_para.runs[0].font.size = Pt(9)
    date_para.runs[0].font.color.rgb = GREY


def add_question_review(doc: Document, review: QuestionReview) -> None:
    """
    Add one question with its options marked.

    The correct option is green; a wrong user answer is red.
    """
    question = review.question

    q_para = doc.add_paragraph()
    q_run = q_para.add_run(f"Q{review.number}. ")
    q_run.bold = True
    q_run.font.size = Pt(12)
    q_para.add_run(question.question)

    status = "Correct" if review.is_correct else ("Wrong" if review.is_answered else "Unanswered")
    status_run = doc.add_paragraph().add_run(f"  Scored {review.points}/1 ({status})")
    status_run.italic = True
    status_run.font.size = Pt(9)
    status_run.font.color.rgb = GREEN if review.is_correct else RED

    for letter_index, option in enumerate(question.options):
        letter = chr(ord("A") + letter_index)
        opt_para = doc.add_paragraph(f"{letter}. {option}")
        opt_para.paragraph_format.left_indent = Inches(0.5)

        if option == question.correct_answer:
            opt_para.runs[0].bold = True
            opt_para.runs[0].font.color.rgb = GREEN
            opt_para.add_run(" (Correct)").font.color.rgb = GREEN
        elif option == review.user_answer:
            opt_para.runs[0].font.color.rgb = RED
            opt_para.add_run(" (Your answer)").font.color.rgb = RED

    if question.explanation:
        exp_para = doc.add_paragraph()
        exp_para.paragraph_format.left_indent = Inches(0.5)
        exp_run = exp_para.add_run(f"Explanation: {question.explanation}")
        exp_run.italic = True
        exp_run.font.size = Pt(10)
        exp_run.font.color.rgb = GREY

    doc.add_paragraph()

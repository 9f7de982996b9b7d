"""Typer CLI application for generating and playing quizzes."""

from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, Prompt
from rich.table import Table

from src.config.exams import find_exam, get_subjects, list_exams
from src.config.logging_config import setup_logging
from src.config.settings import get_settings
from src.content.data_uri import file_to_data_uri
from src.exceptions import ContentError
from src.export.docx_generator import export_review_to_docx
from src.models.quiz import QuestionDifficulty, QuizSource
from src.session.game import GameState, QuizGame
from src.session.results import QuizResult
from src.session.session import QuizSession

app = typer.Typer(
    name="quizwhiz",
    help="Generate multiple-choice quizzes with AI and play them in the terminal",
    add_completion=False,
)

console = Console()

QUESTIONS_OPTION = typer.Option(
    None,
    "--questions",
    "-q",
    help="Number of questions (defaults to DEFAULT_QUESTION_COUNT)",
)
LANGUAGE_OPTION = typer.Option(
    None,
    "--language",
    "-l",
    help='Quiz language, e.g. "English" or "Hindi"',
)
TIMER_OPTION = typer.Option(
    None,
    "--timer",
    help="Time limit in minutes (0 or unset for no limit)",
    min=0,
)
EXPORT_OPTION = typer.Option(
    None,
    "--export",
    "-o",
    help="Write the answer review to this DOCX file",
)


@app.command()
def topic(
    topic_text: str = typer.Argument(..., metavar="TOPIC", help="What the quiz is about"),
    questions: Optional[int] = QUESTIONS_OPTION,
    language: Optional[str] = LANGUAGE_OPTION,
    difficulty: Optional[QuestionDifficulty] = typer.Option(
        None,
        "--difficulty",
        "-d",
        help="Quiz difficulty",
        case_sensitive=False,
    ),
    timer: Optional[int] = TIMER_OPTION,
    export: Optional[Path] = EXPORT_OPTION,
) -> None:
    """
    Generate and play a quiz on a topic.

    Example:
        quizwhiz topic "The Roman Empire" -q 5 -d hard
    """
    form = {
        "topic": topic_text,
        "numberOfQuestions": questions,
        "language": language,
        "difficulty": difficulty.value if difficulty else None,
        "timerDuration": timer,
    }
    run_game(QuizSource.TOPIC, form, export)


@app.command()
def pyq(
    exam: str = typer.Argument(..., help="Exam name (see 'quizwhiz exams')"),
    subject: str = typer.Argument(..., help="Exam subject"),
    topic_text: str = typer.Argument(..., metavar="TOPIC", help="Topic within the subject"),
    questions: Optional[int] = QUESTIONS_OPTION,
    language: Optional[str] = LANGUAGE_OPTION,
    timer: Optional[int] = TIMER_OPTION,
    export: Optional[Path] = EXPORT_OPTION,
) -> None:
    """
    Generate and play a Previous Year Question quiz.

    Example:
        quizwhiz pyq NEET Biology "Human Physiology"
    """
    # Use the catalog spelling when the exam is listed
    form = {
        "exam": find_exam(exam) or exam,
        "subject": subject,
        "topic": topic_text,
        "numberOfQuestions": questions,
        "language": language,
        "timerDuration": timer,
    }
    run_game(QuizSource.PYQ, form, export)


@app.command()
def upload(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Image or text file to build the quiz from",
    ),
    questions: Optional[int] = QUESTIONS_OPTION,
    language: Optional[str] = LANGUAGE_OPTION,
    timer: Optional[int] = TIMER_OPTION,
    export: Optional[Path] = EXPORT_OPTION,
) -> None:
    """
    Generate and play a quiz from a file or photo.

    Example:
        quizwhiz upload notes.txt -q 8
    """
    try:
        data_uri = file_to_data_uri(file)
    except ContentError as e:
        console.print(f"[red]Error:[/red] {e}", style="bold")
        raise typer.Exit(code=1)

    form = {
        "contentDataUri": data_uri,
        "numberOfQuestions": questions,
        "language": language,
        "timerDuration": timer,
    }
    run_game(QuizSource.CONTENT, form, export)


@app.command()
def exams(
    exam: Optional[str] = typer.Argument(None, help="Show the subjects of this exam"),
) -> None:
    """List the exams available for PYQ quizzes, or one exam's subjects."""
    if exam is None:
        table = Table(title="Exams", border_style="cyan")
        table.add_column("Exam", style="cyan")
        table.add_column("Subjects", style="white")
        for name in list_exams():
            table.add_row(name, str(len(get_subjects(name))))
        console.print(table)
        return

    catalog_name = find_exam(exam)
    if catalog_name is None:
        console.print(f"[red]Error:[/red] Unknown exam: {exam}", style="bold")
        raise typer.Exit(code=1)

    table = Table(title=f"{catalog_name} Subjects", border_style="cyan")
    table.add_column("Subject", style="white")
    for subject in get_subjects(catalog_name):
        table.add_row(subject)
    console.print(table)


@app.command()
def info() -> None:
    """Display information about the quiz generator."""
    settings = get_settings()
    info_text = f"""
[bold cyan]QuizWhiz[/bold cyan]
Version: 0.1.0

[bold]Quiz sources:[/bold]
  • Topic - any subject, with language and difficulty
  • PYQ - previous year question style for competitive exams
  • Upload - build a quiz from an image or text file

[bold]Playing:[/bold]
  • [cyan]1-4[/cyan] answer   [cyan]n[/cyan]/[cyan]p[/cyan] next/previous   [cyan]s[/cyan] submit

[bold]Model:[/bold] {settings.model_name} ({settings.model_provider})
[bold]Max questions:[/bold] {settings.max_questions}
    """
    console.print(Panel(info_text, title="QuizWhiz Info", border_style="cyan"))


def run_game(
    source: QuizSource,
    form: dict[str, Any],
    export: Optional[Path],
) -> None:
    """Generate a quiz, play it, show results and optionally export them."""
    game = QuizGame()
    start = {
        QuizSource.TOPIC: game.start_topic_quiz,
        QuizSource.PYQ: game.start_pyq_quiz,
        QuizSource.CONTENT: game.start_content_quiz,
    }[source]

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("[cyan]Generating your quiz...", total=None)
        result = start(form)

    if not result.ok:
        console.print(f"[red]Error generating quiz:[/red] {result.error}", style="bold")
        raise typer.Exit(code=1)

    if game.state == GameState.PAYMENT:
        console.print(Panel("Unlock your quiz to start playing.", border_style="green"))
        Prompt.ask("Press Enter to start", default="", show_default=False)
        game.confirm_unlock()

    play_session(game.session)
    quiz_result = game.finish()
    display_results(quiz_result)

    if export:
        try:
            path = export_review_to_docx(quiz_result, str(export))
        except OSError as e:
            console.print(f"\n[red]Error during export:[/red] {e}", style="bold")
            raise typer.Exit(code=1)
        console.print(f"\n[green]✓[/green] Review exported to: {path}")


def play_session(session: QuizSession) -> None:
    """Ask each question until the user submits or time runs out."""
    while True:
        if session.is_expired:
            console.print("\n[yellow]Time is up! Submitting your answers.[/yellow]")
            return

        show_question(session)
        option_count = len(session.current_question.options)
        choice = Prompt.ask(f"Answer [1-{option_count}], n, p or s").strip().lower()

        if session.is_expired:
            console.print("\n[yellow]Time is up! Your last answer was not recorded.[/yellow]")
            console.print("[yellow]Submitting your answers.[/yellow]")
            return

        if choice == "n":
            if not session.next():
                console.print("[dim]This is the last question.[/dim]")
        elif choice == "p":
            if not session.previous():
                console.print("[dim]This is the first question.[/dim]")
        elif choice == "s":
            if confirm_submit(session):
                return
        elif choice.isdigit():
            try:
                session.answer_by_number(int(choice))
            except ValueError as e:
                console.print(f"[red]{e}[/red]")
                continue
            if session.is_last_question:
                if confirm_submit(session):
                    return
            else:
                session.next()
        else:
            console.print("[red]Unknown choice.[/red]")


def confirm_submit(session: QuizSession) -> bool:
    """Ask before submitting, warning about unanswered questions."""
    unanswered = session.unanswered_count
    if unanswered:
        message = f"You have {unanswered} unanswered question(s). Finish the quiz?"
    else:
        message = "You have answered all questions. Finish the quiz?"
    return Confirm.ask(message, default=unanswered == 0)


def show_question(session: QuizSession) -> None:
    """Render the current question with its options."""
    question = session.current_question
    header = f"Question {session.current_index + 1} of {session.total_questions}"
    remaining = session.time_remaining()
    if remaining is not None:
        minutes, seconds = divmod(int(remaining), 60)
        header += f"  |  {minutes:02d}:{seconds:02d} left"

    lines = [f"[bold]{question.question}[/bold]", ""]
    for number, option in enumerate(question.options, 1):
        marker = "[green]●[/green]" if option == session.current_answer else "○"
        lines.append(f"  {marker} [cyan]{number}[/cyan]. {option}")

    console.print()
    console.print(Panel("\n".join(lines), title=header, border_style="cyan"))


def display_results(result: QuizResult) -> None:
    """Display the score, answer review and share text."""
    console.print("\n[bold green]Quiz Complete![/bold green]")

    if result.percentage >= 80:
        score_color = "green"
    elif result.percentage >= 50:
        score_color = "yellow"
    else:
        score_color = "red"
    console.print(
        f"You scored [{score_color}]{result.score}[/{score_color}] out of {result.total} "
        f"([{score_color}]{result.percentage}%[/{score_color}])"
    )

    table = Table(title="Review Your Answers", border_style="cyan", show_lines=True)
    table.add_column("#", style="cyan")
    table.add_column("Question", style="white")
    table.add_column("Your answer")
    table.add_column("Correct answer", style="green")
    table.add_column("Explanation", style="dim")

    for review in result.review():
        answer_style = "green" if review.is_correct else "red"
        your_answer = review.user_answer or "(unanswered)"
        table.add_row(
            str(review.number),
            review.question.question,
            f"[{answer_style}]{your_answer}[/{answer_style}]",
            review.question.correct_answer,
            review.question.explanation,
        )

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(result.share_text(get_settings().share_url), title="Share", border_style="magenta")
    )


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    QuizWhiz - Create quizzes from a topic, past exam papers or your own notes.
    """
    setup_logging("DEBUG" if verbose else get_settings().log_level)

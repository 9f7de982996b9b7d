"""Quiz actions - validate form input and run the matching prompt flow."""

import logging
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from src.exceptions import EmptyQuizError
from src.flows.content import generate_quiz_from_content
from src.flows.pyq import generate_quiz_from_pyq
from src.flows.topic import generate_quiz_questions
from src.models.forms import (
    ActionResult,
    ContentQuizForm,
    PyqQuizForm,
    TopicQuizForm,
    flatten_field_errors,
)
from src.models.quiz import Quiz

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input."
UNEXPECTED_ERROR = (
    "An unexpected error occurred while generating the quiz. Please try again."
)
EMPTY_TOPIC_QUIZ = "Could not generate a quiz for this topic. Please try another one."
EMPTY_PYQ_QUIZ = (
    "Could not generate a PYQ quiz for this combination. Please try another one."
)
EMPTY_CONTENT_QUIZ = (
    "Could not generate a quiz from the provided content. Please try another file/image."
)

FormData = Mapping[str, Any]

# Field order decides which error is shown when several fields fail
TOPIC_FIELDS = ["topic", "number_of_questions", "timer_duration"]
CONTENT_FIELDS = ["content_data_uri", "number_of_questions", "timer_duration"]
PYQ_FIELDS = ["exam", "subject", "topic", "number_of_questions", "timer_duration"]


def first_field_error(
    error: ValidationError, model: type[BaseModel], field_order: list[str]
) -> str:
    """
    Pick the message to show for a failed form.

    The first field in field_order that has errors wins, with all of its
    messages joined by ", ". Anything else falls back to "Invalid input."

    Args:
        error: The validation error
        model: The form model that raised it
        field_order: Field names in display priority

    Returns:
        A single user-facing message
    """
    field_errors = flatten_field_errors(error, model)
    for field in field_order:
        messages = field_errors.get(field)
        if messages:
            return ", ".join(messages)
    return INVALID_INPUT


def _run(
    generate: Callable[[], Quiz],
    empty_message: str,
    timer_duration: int | None = None,
) -> ActionResult:
    try:
        quiz = generate()
    except EmptyQuizError:
        logger.warning("Model returned an empty quiz")
        return ActionResult.failure(empty_message)
    except Exception:
        logger.exception("Quiz generation failed")
        return ActionResult.failure(UNEXPECTED_ERROR)

    if not quiz.questions:
        return ActionResult.failure(empty_message)
    return ActionResult.success(quiz, timer_duration=timer_duration)


def create_quiz(form_data: FormData) -> ActionResult:
    """
    Create a quiz on a free-text topic.

    Args:
        form_data: Form fields (topic, numberOfQuestions, language, difficulty)

    Returns:
        ActionResult with the quiz or a user-facing error
    """
    try:
        form = TopicQuizForm.model_validate(form_data)
    except ValidationError as e:
        return ActionResult.failure(
            first_field_error(e, TopicQuizForm, TOPIC_FIELDS)
        )

    return _run(
        lambda: generate_quiz_questions(
            topic=form.topic,
            number_of_questions=form.number_of_questions,
            language=form.language,
            difficulty=form.difficulty,
        ),
        EMPTY_TOPIC_QUIZ,
        form.timer_duration,
    )


def create_quiz_from_content(form_data: FormData) -> ActionResult:
    """
    Create a quiz from uploaded content.

    Args:
        form_data: Form fields (contentDataUri, numberOfQuestions, language)

    Returns:
        ActionResult with the quiz or a user-facing error
    """
    try:
        form = ContentQuizForm.model_validate(form_data)
    except ValidationError as e:
        return ActionResult.failure(
            first_field_error(e, ContentQuizForm, CONTENT_FIELDS)
        )

    return _run(
        lambda: generate_quiz_from_content(
            content_data_uri=form.content_data_uri,
            number_of_questions=form.number_of_questions,
            language=form.language,
        ),
        EMPTY_CONTENT_QUIZ,
        form.timer_duration,
    )


def create_quiz_from_pyq(form_data: FormData) -> ActionResult:
    """
    Create a Previous Year Question quiz.

    Args:
        form_data: Form fields (exam, subject, topic, numberOfQuestions, language)

    Returns:
        ActionResult with the quiz or a user-facing error
    """
    try:
        form = PyqQuizForm.model_validate(form_data)
    except ValidationError as e:
        return ActionResult.failure(
            first_field_error(e, PyqQuizForm, PYQ_FIELDS)
        )

    return _run(
        lambda: generate_quiz_from_pyq(
            exam=form.exam,
            subject=form.subject,
            topic=form.topic,
            number_of_questions=form.number_of_questions,
            language=form.language,
        ),
        EMPTY_PYQ_QUIZ,
        form.timer_duration,
    )

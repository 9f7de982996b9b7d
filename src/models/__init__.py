"""Data models for quiz generation."""

from .forms import (
    ActionResult,
    ContentQuizForm,
    PyqQuizForm,
    TopicQuizForm,
    flatten_field_errors,
)
from .quiz import (
    QuestionDifficulty,
    # Structured output model
    QuestionList,
    Quiz,
    QuizMetadata,
    QuizQuestion,
    QuizSource,
)

__all__ = [
    "QuizQuestion",
    "QuestionList",
    "Quiz",
    "QuizMetadata",
    "QuizSource",
    "QuestionDifficulty",
    "TopicQuizForm",
    "PyqQuizForm",
    "ContentQuizForm",
    "ActionResult",
    "flatten_field_errors",
]

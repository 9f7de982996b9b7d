"""Prompt flows that turn quiz requests into model calls."""

from .content import generate_quiz_from_content
from .pyq import generate_quiz_from_pyq
from .topic import generate_quiz_questions

__all__ = [
    "generate_quiz_questions",
    "generate_quiz_from_pyq",
    "generate_quiz_from_content",
]

"""Actions that validate quiz requests and call the prompt flows."""

from .quiz_actions import create_quiz, create_quiz_from_content, create_quiz_from_pyq

__all__ = [
    "create_quiz",
    "create_quiz_from_pyq",
    "create_quiz_from_content",
]

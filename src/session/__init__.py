"""Quiz session state, game flow and scoring."""

from .game import GameState, QuizGame
from .results import QuestionReview, QuizResult, percentage, score_quiz
from .session import QuizSession

__all__ = [
    "GameState",
    "QuizGame",
    "QuizSession",
    "QuizResult",
    "QuestionReview",
    "score_quiz",
    "percentage",
]

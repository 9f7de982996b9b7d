"""Scoring and review of a finished quiz."""

import math

from pydantic import BaseModel, Field

from src.models.quiz import Quiz, QuizQuestion

APP_NAME = "QuizWhiz"


def score_quiz(quiz: Quiz, answers: list[str]) -> int:
    """
    Count the questions answered correctly.

    Answers are compared to each question's correct answer by equality;
    missing answers count as wrong.

    Args:
        quiz: The quiz that was played
        answers: User answers by question position ("" for unanswered)

    Returns:
        Number of correct answers
    """
    return sum(
        1
        for index, question in enumerate(quiz.questions)
        if index < len(answers) and answers[index] == question.correct_answer
    )


def percentage(score: int, total: int) -> int:
    """Score as a whole percentage, rounded half up (0 for an empty quiz)."""
    if total <= 0:
        return 0
    return math.floor(score * 100 / total + 0.5)


class QuestionReview(BaseModel):
    """How the user did on a single question."""

    number: int = Field(..., ge=1)
    question: QuizQuestion
    user_answer: str = ""

    @property
    def is_correct(self) -> bool:
        return self.user_answer == self.question.correct_answer

    @property
    def is_answered(self) -> bool:
        return self.user_answer != ""

    @property
    def points(self) -> int:
        return 1 if self.is_correct else 0


class QuizResult(BaseModel):
    """Final score and per-question review of a played quiz."""

    quiz: Quiz
    answers: list[str] = Field(default_factory=list)
    score: int = Field(..., ge=0)

    @classmethod
    def from_answers(cls, quiz: Quiz, answers: list[str]) -> "QuizResult":
        """Score answers against a quiz."""
        return cls(quiz=quiz, answers=list(answers), score=score_quiz(quiz, answers))

    @property
    def total(self) -> int:
        return self.quiz.total_questions

    @property
    def percentage(self) -> int:
        return percentage(self.score, self.total)

    def review(self) -> list[QuestionReview]:
        """Pair each question with the user's answer."""
        return [
            QuestionReview(
                number=index + 1,
                question=question,
                user_answer=self.answers[index] if index < len(self.answers) else "",
            )
            for index, question in enumerate(self.quiz.questions)
        ]

    def share_text(self, url: str | None = None) -> str:
        """
        Build the message used to share a score.

        Args:
            url: Optional link to append

        Returns:
            Share message
        """
        text = (
            f"🎉 Congratulations! You scored {self.score}/{self.total} in {APP_NAME}!\n"
            "Think you can do better? 💪\n"
            "Challenge your friends and see who’s the real quiz master!"
        )
        if url:
            text += f"\n\nTake the quiz here: {url}"
        return text

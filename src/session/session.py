"""In-memory state for one quiz being played."""

import time
from typing import Callable

from src.config.settings import get_settings
from src.models.quiz import Quiz, QuizQuestion

UNANSWERED = ""


class QuizSession:
    """
    Answers and navigation for a single play-through of a quiz.

    Answers are stored by question position, with "" meaning unanswered.
    An optional timer (in minutes) is measured with the supplied clock.
    """

    def __init__(
        self,
        quiz: Quiz,
        timer_minutes: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if not quiz.questions:
            raise ValueError("Cannot play a quiz without questions")

        max_minutes = get_settings().max_timer_minutes
        if timer_minutes is not None and not 0 <= timer_minutes <= max_minutes:
            raise ValueError(f"Timer must be between 0 and {max_minutes} minutes")

        self.quiz = quiz
        self.answers: list[str] = [UNANSWERED] * len(quiz.questions)
        self.current_index = 0
        # A zero-minute timer means untimed
        self.timer_minutes = timer_minutes or None
        self._clock = clock
        self._started_at = clock()

    @property
    def current_question(self) -> QuizQuestion:
        return self.quiz.questions[self.current_index]

    @property
    def total_questions(self) -> int:
        return len(self.quiz.questions)

    @property
    def is_first_question(self) -> bool:
        return self.current_index == 0

    @property
    def is_last_question(self) -> bool:
        return self.current_index == self.total_questions - 1

    @property
    def current_answer(self) -> str:
        return self.answers[self.current_index]

    @property
    def unanswered_count(self) -> int:
        return sum(1 for answer in self.answers if answer == UNANSWERED)

    @property
    def progress(self) -> float:
        """Position in the quiz as a percentage (question 1 of 4 is 25%)."""
        return (self.current_index + 1) / self.total_questions * 100

    def answer(self, option: str) -> None:
        """
        Record an answer for the current question, replacing any earlier one.

        Raises:
            ValueError: If option isn't one of the current question's options
        """
        if option not in self.current_question.options:
            raise ValueError(f"{option!r} is not an option for this question")
        self.answers[self.current_index] = option

    def answer_by_number(self, number: int) -> str:
        """Answer with the 1-based option number and return the chosen option."""
        options = self.current_question.options
        if not 1 <= number <= len(options):
            raise ValueError(f"Choose an option between 1 and {len(options)}")
        option = options[number - 1]
        self.answer(option)
        return option

    def clear_answer(self) -> None:
        self.answers[self.current_index] = UNANSWERED

    def next(self) -> bool:
        """Move to the next question. Returns False at the last question."""
        if self.current_index < self.total_questions - 1:
            self.current_index += 1
            return True
        return False

    def previous(self) -> bool:
        """Move to the previous question. Returns False at the first question."""
        if self.current_index > 0:
            self.current_index -= 1
            return True
        return False

    def go_to(self, index: int) -> None:
        if not 0 <= index < self.total_questions:
            raise IndexError(f"No question at position {index}")
        self.current_index = index

    def time_remaining(self) -> float | None:
        """Seconds left on the timer, or None for an untimed quiz."""
        if self.timer_minutes is None:
            return None
        elapsed = self._clock() - self._started_at
        return max(0.0, self.timer_minutes * 60 - elapsed)

    @property
    def is_expired(self) -> bool:
        remaining = self.time_remaining()
        return remaining is not None and remaining <= 0

    def submit(self) -> list[str]:
        """Return a copy of the answers for scoring."""
        return list(self.answers)

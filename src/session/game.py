"""Game flow: idle -> loading -> (payment ->) playing -> finished."""

import logging
import time
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable

from src.actions.quiz_actions import (
    create_quiz,
    create_quiz_from_content,
    create_quiz_from_pyq,
)
from src.config.settings import get_settings
from src.exceptions import InvalidTransitionError
from src.models.forms import ActionResult
from src.models.quiz import Quiz
from src.session.results import QuizResult
from src.session.session import QuizSession

logger = logging.getLogger(__name__)

QuizAction = Callable[[Mapping[str, Any]], ActionResult]


class GameState(str, Enum):
    """Stages of a quiz game."""

    IDLE = "idle"
    LOADING = "loading"
    PAYMENT = "payment"
    PLAYING = "playing"
    FINISHED = "finished"


class QuizGame:
    """
    Drives one quiz at a time through its lifecycle.

    A failed generation returns the game to idle with last_error set.
    Transitions not allowed from the current state raise InvalidTransitionError.
    """

    def __init__(
        self,
        require_unlock: bool | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if require_unlock is None:
            require_unlock = get_settings().require_unlock
        self.require_unlock = require_unlock
        self._clock = clock
        self.state = GameState.IDLE
        self.quiz: Quiz | None = None
        self.session: QuizSession | None = None
        self.result: QuizResult | None = None
        self.last_error: str | None = None

    def _require(self, expected: GameState, action: str) -> None:
        if self.state != expected:
            raise InvalidTransitionError(self.state.value, action)

    def start(
        self,
        action: QuizAction,
        form_data: Mapping[str, Any],
        timer_minutes: int | None = None,
    ) -> ActionResult:
        """
        Generate a quiz with an action and move into play.

        Args:
            action: One of the quiz actions
            form_data: Form fields for the action
            timer_minutes: Quiz timer overriding the form's timerDuration

        Returns:
            The action's result, or a failure if the session can't be set up
        """
        self._require(GameState.IDLE, "start a quiz")
        self.last_error = None
        self.state = GameState.LOADING

        try:
            result = action(form_data)
        except Exception:
            self.state = GameState.IDLE
            raise

        if not result.ok:
            logger.info("Quiz generation failed: %s", result.error)
            self.last_error = result.error
            self.state = GameState.IDLE
            return result

        if timer_minutes is None:
            timer_minutes = result.timer_duration
        try:
            session = QuizSession(result.data, timer_minutes=timer_minutes, clock=self._clock)
        except ValueError as e:
            logger.info("Could not start quiz session: %s", e)
            self.last_error = str(e)
            self.state = GameState.IDLE
            return ActionResult.failure(str(e))

        self.quiz = result.data
        self.session = session
        self.state = GameState.PAYMENT if self.require_unlock else GameState.PLAYING
        logger.debug("Quiz ready with %d question(s)", self.quiz.total_questions)
        return result

    def start_topic_quiz(
        self, form_data: Mapping[str, Any], timer_minutes: int | None = None
    ) -> ActionResult:
        return self.start(create_quiz, form_data, timer_minutes)

    def start_pyq_quiz(
        self, form_data: Mapping[str, Any], timer_minutes: int | None = None
    ) -> ActionResult:
        return self.start(create_quiz_from_pyq, form_data, timer_minutes)

    def start_content_quiz(
        self, form_data: Mapping[str, Any], timer_minutes: int | None = None
    ) -> ActionResult:
        return self.start(create_quiz_from_content, form_data, timer_minutes)

    def confirm_unlock(self) -> None:
        """Leave the unlock step and start playing."""
        self._require(GameState.PAYMENT, "unlock the quiz")
        self.state = GameState.PLAYING

    def finish(self, answers: list[str] | None = None) -> QuizResult:
        """
        Score the quiz and show results.

        Args:
            answers: Answers to score (defaults to the session's answers)

        Returns:
            The scored result
        """
        self._require(GameState.PLAYING, "finish the quiz")
        if answers is None:
            answers = self.session.submit()
        self.result = QuizResult.from_answers(self.quiz, answers)
        self.state = GameState.FINISHED
        return self.result

    def play_again(self) -> None:
        """Discard the finished quiz and go back to idle."""
        self._require(GameState.FINISHED, "play again")
        self.quiz = None
        self.session = None
        self.result = None
        self.last_error = None
        self.state = GameState.IDLE

    @property
    def score(self) -> int:
        return self.result.score if self.result else 0

"""Custom exceptions for QuizWhiz."""


class QuizWhizError(Exception):
    """Base exception for all QuizWhiz errors."""

    pass


class ContentError(QuizWhizError):
    """Raised when uploaded content can't be used to build a quiz."""

    def __init__(self, message: str, mime_type: str | None = None):
        self.mime_type = mime_type
        super().__init__(message)


class QuizGenerationError(QuizWhizError):
    """Raised when the model call fails to produce a usable quiz."""

    pass


class EmptyQuizError(QuizGenerationError):
    """Raised when the model returns no questions."""

    pass


class InvalidTransitionError(QuizWhizError):
    """Raised when the game is asked to move to a state it can't reach."""

    def __init__(self, current: str, action: str):
        self.current = current
        self.action = action
        super().__init__(f"Cannot {action} while the game is {current}")

"""Pydantic models for quiz data structures."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: "str | QuestionDifficulty") -> "QuestionDifficulty":
        """Parse a difficulty name regardless of case."""
        if isinstance(value, cls):
            return value
        wanted = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"Unknown difficulty: {value}")


class QuizSource(str, Enum):
    """Where the quiz content came from."""

    TOPIC = "topic"
    PYQ = "pyq"
    CONTENT = "content"


class QuizQuestion(BaseModel):
    """A single multiple choice question."""

    question: str = Field(..., min_length=1, description="The quiz question.")
    options: list[str] = Field(
        ...,
        min_length=2,
        description="The possible answers to the question.",
    )
    correct_answer: str = Field(
        ...,
        alias="correctAnswer",
        description="The correct answer to the question, copied verbatim from the options.",
    )
    explanation: str = Field(
        default="",
        description="A detailed explanation of why the correct answer is right.",
    )

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[str]) -> list[str]:
        """Strip options and reject blanks."""
        cleaned = [option.strip() for option in v]
        for index, option in enumerate(cleaned):
            if not option:
                raise ValueError(f"Option {index + 1} cannot be empty")
        return cleaned

    @model_validator(mode="after")
    def validate_correct_answer(self) -> "QuizQuestion":
        """Ensure the correct answer is one of the options."""
        if self.correct_answer in self.options:
            return self

        # Models sometimes drift on case or spacing; snap to the option text
        wanted = self.correct_answer.strip().lower()
        for option in self.options:
            if option.lower() == wanted:
                self.correct_answer = option
                return self

        raise ValueError(
            f"Correct answer {self.correct_answer!r} is not one of the options"
        )

    def is_correct(self, answer: str) -> bool:
        """Check an answer against the correct one."""
        return answer == self.correct_answer

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "question": "What is the capital of France?",
                "options": ["London", "Paris", "Berlin", "Madrid"],
                "correctAnswer": "Paris",
                "explanation": "Paris has been the capital of France since 987 AD.",
            }
        },
    }


class QuestionList(BaseModel):
    """An array of quiz questions with options and correct answers."""

    questions: list[QuizQuestion] = Field(
        default_factory=list,
        description="List of generated questions",
    )


class QuizMetadata(BaseModel):
    """Metadata about the quiz generation request."""

    source: QuizSource = Field(default=QuizSource.TOPIC)
    topic: str | None = Field(None, description="Topic, PYQ topic or content label")
    exam: str | None = None
    subject: str | None = None
    language: str = Field(default="English")
    difficulty: QuestionDifficulty | None = None
    requested_questions: int | None = Field(None, ge=1)
    model_used: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    generation_time_seconds: float | None = Field(None, ge=0.0)


class Quiz(BaseModel):
    """An ordered list of questions produced by one generation request."""

    questions: list[QuizQuestion] = Field(
        default_factory=list,
        description="Quiz questions in play order",
    )
    metadata: QuizMetadata = Field(
        default_factory=QuizMetadata,
        description="Quiz generation metadata",
    )

    @property
    def total_questions(self) -> int:
        """Get the number of questions in the quiz."""
        return len(self.questions)

    @property
    def title(self) -> str:
        """A display title built from the metadata."""
        meta = self.metadata
        if meta.source == QuizSource.PYQ and meta.exam:
            parts = [meta.exam, meta.subject, meta.topic]
            return " / ".join(part for part in parts if part)
        return meta.topic or "QuizWhiz Quiz"

    def __len__(self) -> int:
        return len(self.questions)

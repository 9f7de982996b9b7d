"""Form models for quiz requests and the action result envelope."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

from src.config.settings import get_settings
from src.content.data_uri import parse_data_uri
from src.exceptions import ContentError
from src.models.quiz import QuestionDifficulty, Quiz


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_topic(value: str) -> str:
    settings = get_settings()
    if len(value) < settings.topic_min_length:
        raise PydanticCustomError(
            "topic_too_short",
            "Topic must be at least {min_length} characters long.",
            {"min_length": settings.topic_min_length},
        )
    if len(value) > settings.topic_max_length:
        raise PydanticCustomError(
            "topic_too_long",
            "Topic must be at most {max_length} characters long.",
            {"max_length": settings.topic_max_length},
        )
    return value


class QuizFormBase(BaseModel):
    """Fields shared by every quiz request form."""

    number_of_questions: int = Field(
        ...,
        alias="numberOfQuestions",
        description="Number of questions to generate",
    )
    language: str = Field(..., description="Quiz language, e.g. English or Hindi")
    timer_duration: int | None = Field(
        None,
        alias="timerDuration",
        description="Quiz timer in minutes (None for untimed)",
    )

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        """Fill missing or blank fields from settings."""
        if not isinstance(data, Mapping):
            raise PydanticCustomError("form_type", "Form data must be a mapping of field names.")
        # Form-like mappings (e.g. multidicts) are copied into a plain dict
        data = dict(data)
        settings = get_settings()
        if _blank(data.get("numberOfQuestions", data.get("number_of_questions"))):
            data.pop("number_of_questions", None)
            data["numberOfQuestions"] = settings.default_question_count
        if _blank(data.get("language")):
            data["language"] = settings.default_language
        return data

    @field_validator("number_of_questions", mode="before")
    @classmethod
    def coerce_question_count(cls, v: Any) -> int:
        """Coerce form strings into a whole number."""
        if isinstance(v, bool):
            raise PydanticCustomError(
                "question_count_type", "Number of questions must be a whole number."
            )
        if isinstance(v, float) and v.is_integer():
            return int(v)
        try:
            return int(str(v).strip()) if isinstance(v, str) else int(v)
        except (TypeError, ValueError):
            raise PydanticCustomError(
                "question_count_type", "Number of questions must be a whole number."
            ) from None

    @field_validator("number_of_questions")
    @classmethod
    def validate_question_count(cls, v: int) -> int:
        """Ensure the question count is within range."""
        if v < 1:
            raise PydanticCustomError(
                "question_count_too_low", "You must request at least 1 question."
            )
        max_questions = get_settings().max_questions
        if v > max_questions:
            raise PydanticCustomError(
                "question_count_too_high",
                "You can request at most {max_questions} questions.",
                {"max_questions": max_questions},
            )
        return v

    @field_validator("language")
    @classmethod
    def clean_language(cls, v: str) -> str:
        return v.strip()

    @field_validator("timer_duration", mode="before")
    @classmethod
    def coerce_timer(cls, v: Any) -> int | None:
        """Blank means untimed; anything else must be whole minutes."""
        if _blank(v):
            return None
        try:
            return int(str(v).strip()) if isinstance(v, str) else int(v)
        except (TypeError, ValueError):
            raise PydanticCustomError(
                "timer_type", "Timer must be a whole number of minutes."
            ) from None

    @field_validator("timer_duration")
    @classmethod
    def validate_timer(cls, v: int | None) -> int | None:
        if v is None:
            return v
        if v < 0:
            raise PydanticCustomError("timer_negative", "Timer must be a positive number.")
        max_minutes = get_settings().max_timer_minutes
        if v > max_minutes:
            raise PydanticCustomError(
                "timer_too_long",
                "Timer cannot exceed {max_minutes} minutes.",
                {"max_minutes": max_minutes},
            )
        return v

    model_config = {"populate_by_name": True}


class TopicQuizForm(QuizFormBase):
    """A quiz on a free-text topic."""

    topic: str = Field(
        "",
        validate_default=True,
        description="The topic for which to generate quiz questions",
    )
    difficulty: QuestionDifficulty = Field(
        default_factory=lambda: QuestionDifficulty.parse(get_settings().default_difficulty),
        description="The difficulty level of the quiz",
    )

    @field_validator("topic", mode="before")
    @classmethod
    def strip_topic(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v: str) -> str:
        return _check_topic(v)

    @field_validator("difficulty", mode="before")
    @classmethod
    def parse_difficulty(cls, v: Any) -> QuestionDifficulty:
        if _blank(v):
            return QuestionDifficulty.parse(get_settings().default_difficulty)
        try:
            return QuestionDifficulty.parse(v)
        except ValueError:
            raise PydanticCustomError(
                "difficulty_unknown", "Difficulty must be Easy, Medium or Hard."
            ) from None


class PyqQuizForm(QuizFormBase):
    """A Previous Year Question quiz for an exam subject and topic."""

    exam: str = Field(
        "",
        validate_default=True,
        description="The competitive exam to draw questions from",
    )
    subject: str = Field("", validate_default=True, description="The exam subject")
    topic: str = Field("", validate_default=True, description="Topic within the subject")

    @field_validator("exam", "subject", "topic", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("exam")
    @classmethod
    def validate_exam(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("exam_missing", "Please select an exam.")
        return v

    @field_validator("subject")
    @classmethod
    def validate_subject(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("subject_missing", "Please select a subject.")
        return v

    @field_validator("topic")
    @classmethod
    def validate_topic(cls, v: str) -> str:
        return _check_topic(v)


class ContentQuizForm(QuizFormBase):
    """A quiz built from an uploaded file or image."""

    content_data_uri: str = Field(
        "",
        validate_default=True,
        alias="contentDataUri",
        description="Content as 'data:<mimetype>;base64,<encoded_data>'",
    )

    @field_validator("content_data_uri", mode="before")
    @classmethod
    def strip_content(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("content_data_uri")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("content_missing", "File content is missing.")
        try:
            parse_data_uri(v, max_bytes=get_settings().max_upload_bytes)
        except ContentError as e:
            raise PydanticCustomError("content_invalid", str(e)) from None
        return v


class ActionResult(BaseModel):
    """Outcome of a quiz action: either a quiz or a user-facing error."""

    data: Quiz | None = None
    error: str | None = None
    timer_duration: int | None = Field(
        None, description="Validated quiz timer in minutes, carried with the quiz"
    )

    @model_validator(mode="after")
    def check_exactly_one(self) -> "ActionResult":
        if (self.data is None) == (self.error is None):
            raise ValueError("ActionResult needs exactly one of data or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, quiz: Quiz, timer_duration: int | None = None) -> "ActionResult":
        return cls(data=quiz, timer_duration=timer_duration)

    @classmethod
    def failure(cls, message: str) -> "ActionResult":
        return cls(error=message)


def flatten_field_errors(
    error: ValidationError, model: type[BaseModel]
) -> dict[str, list[str]]:
    """
    Group validation messages by field name.

    Errors reported under an alias (e.g. 'numberOfQuestions') are filed under
    the Python field name. Errors without a field go under '__root__'.

    Args:
        error: The pydantic validation error
        model: The model that raised it

    Returns:
        Mapping of field name to its messages, in the order they were raised
    """
    alias_to_name = {
        (info.alias or name): name for name, info in model.model_fields.items()
    }
    field_errors: dict[str, list[str]] = {}
    for item in error.errors():
        loc = item.get("loc") or ()
        key = str(loc[0]) if loc else "__root__"
        key = alias_to_name.get(key, key)
        field_errors.setdefault(key, []).append(item["msg"])
    return field_errors

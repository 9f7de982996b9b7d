"""Shared test fixtures and configuration for pytest."""

import base64
from typing import Any

import pytest

from src.config.settings import get_settings
from src.models.quiz import (
    QuestionDifficulty,
    QuestionList,
    Quiz,
    QuizMetadata,
    QuizQuestion,
    QuizSource,
)


class StubChatModel:
    """Stands in for a LangChain chat model with structured output."""

    def __init__(self, response: Any):
        self.response = response
        self.schema = None
        self.messages = None
        self.calls = 0

    def with_structured_output(self, schema):
        self.schema = schema
        return self

    def invoke(self, messages):
        self.calls += 1
        self.messages = messages
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_question() -> QuizQuestion:
    """Create a sample QuizQuestion for testing."""
    return QuizQuestion(
        question="What is the capital of France?",
        options=["London", "Paris", "Berlin", "Madrid"],
        correct_answer="Paris",
        explanation="Paris is the capital and largest city of France.",
    )


@pytest.fixture
def sample_questions() -> list[QuizQuestion]:
    """Create a list of sample questions for testing."""
    return [
        QuizQuestion(
            question="What is 2 + 2?",
            options=["3", "4", "5", "6"],
            correct_answer="4",
            explanation="Basic addition: 2 + 2 = 4",
        ),
        QuizQuestion(
            question="What is the speed of light?",
            options=[
                "299,792,458 m/s",
                "300,000,000 m/s",
                "150,000,000 m/s",
                "500,000,000 m/s",
            ],
            correct_answer="299,792,458 m/s",
            explanation="The speed of light in vacuum is exactly 299,792,458 m/s.",
        ),
        QuizQuestion(
            question="Who wrote '1984'?",
            options=["Aldous Huxley", "George Orwell", "Ray Bradbury", "Philip K. Dick"],
            correct_answer="George Orwell",
            explanation="George Orwell wrote the dystopian novel '1984' in 1949.",
        ),
    ]


@pytest.fixture
def sample_quiz(sample_questions: list[QuizQuestion]) -> Quiz:
    """Create a sample Quiz for testing."""
    return Quiz(
        questions=sample_questions,
        metadata=QuizMetadata(
            source=QuizSource.TOPIC,
            topic="General Knowledge",
            language="English",
            difficulty=QuestionDifficulty.MEDIUM,
            requested_questions=3,
        ),
    )


@pytest.fixture
def stub_llm(monkeypatch, sample_questions: list[QuizQuestion]) -> StubChatModel:
    """Replace the chat model used by the flows with a stub."""
    stub = StubChatModel(QuestionList(questions=sample_questions))
    monkeypatch.setattr("src.flows.base.get_chat_model", lambda settings=None: stub)
    return stub


@pytest.fixture
def text_data_uri() -> str:
    """A small text upload as a data URI."""
    encoded = base64.b64encode(b"Photosynthesis turns light into chemical energy.").decode()
    return f"data:text/plain;base64,{encoded}"


@pytest.fixture
def image_data_uri() -> str:
    """A (fake) PNG upload as a data URI."""
    encoded = base64.b64encode(b"\x89PNG\r\n\x1a\nfake-image-bytes").decode()
    return f"data:image/png;base64,{encoded}"

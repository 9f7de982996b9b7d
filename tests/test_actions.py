"""Tests for the quiz actions."""

import pytest

from src.actions import quiz_actions
from src.actions.quiz_actions import (
    EMPTY_CONTENT_QUIZ,
    EMPTY_PYQ_QUIZ,
    EMPTY_TOPIC_QUIZ,
    INVALID_INPUT,
    UNEXPECTED_ERROR,
    create_quiz,
    create_quiz_from_content,
    create_quiz_from_pyq,
)
from src.exceptions import EmptyQuizError
from src.models.quiz import QuestionDifficulty, QuestionList, Quiz


class RecordingFlow:
    """Records the arguments a flow was called with and returns a canned result."""

    def __init__(self, result):
        self.result = result
        self.kwargs = None

    def __call__(self, **kwargs):
        self.kwargs = kwargs
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def topic_flow(monkeypatch, sample_quiz: Quiz) -> RecordingFlow:
    flow = RecordingFlow(sample_quiz)
    monkeypatch.setattr(quiz_actions, "generate_quiz_questions", flow)
    return flow


@pytest.fixture
def pyq_flow(monkeypatch, sample_quiz: Quiz) -> RecordingFlow:
    flow = RecordingFlow(sample_quiz)
    monkeypatch.setattr(quiz_actions, "generate_quiz_from_pyq", flow)
    return flow


@pytest.fixture
def content_flow(monkeypatch, sample_quiz: Quiz) -> RecordingFlow:
    flow = RecordingFlow(sample_quiz)
    monkeypatch.setattr(quiz_actions, "generate_quiz_from_content", flow)
    return flow


class TestCreateQuiz:
    """Test the topic action."""

    def test_success(self, topic_flow: RecordingFlow, sample_quiz: Quiz):
        """Test a valid request returns the quiz."""
        result = create_quiz(
            {"topic": "Space", "numberOfQuestions": "3", "language": "English", "difficulty": "hard"}
        )

        assert result.ok
        assert result.data == sample_quiz
        assert topic_flow.kwargs == {
            "topic": "Space",
            "number_of_questions": 3,
            "language": "English",
            "difficulty": QuestionDifficulty.HARD,
        }

    def test_topic_error_reported_first(self, topic_flow: RecordingFlow):
        """Test that the topic error wins over the count error."""
        result = create_quiz({"topic": "x", "numberOfQuestions": "0"})

        assert result.error == "Topic must be at least 2 characters long."
        assert topic_flow.kwargs is None

    def test_count_error(self, topic_flow: RecordingFlow):
        """Test the count error when the topic is fine."""
        result = create_quiz({"topic": "Space", "numberOfQuestions": "0"})
        assert result.error == "You must request at least 1 question."

    def test_unlisted_field_error_is_generic(self, topic_flow: RecordingFlow):
        """Test that errors outside the reported fields fall back to a generic message."""
        result = create_quiz({"topic": "Space", "difficulty": "legendary"})
        assert result.error == INVALID_INPUT

    def test_carries_validated_timer(self, topic_flow: RecordingFlow):
        """Test that the parsed timer comes back with the quiz."""
        result = create_quiz({"topic": "Space", "timerDuration": " 15 "})
        assert result.ok
        assert result.timer_duration == 15

    def test_timer_error(self, topic_flow: RecordingFlow):
        """Test that a bad timer is reported by name."""
        result = create_quiz({"topic": "Space", "timerDuration": "500"})
        assert result.error == "Timer cannot exceed 120 minutes."

    @pytest.mark.parametrize("form_data", [None, "topic=Space", ["Space"]])
    def test_non_mapping_form_is_invalid_input(self, topic_flow: RecordingFlow, form_data):
        """Test that form data that isn't a mapping is rejected cleanly."""
        result = create_quiz(form_data)
        assert result.error == INVALID_INPUT
        assert topic_flow.kwargs is None

    def test_empty_quiz(self, topic_flow: RecordingFlow):
        """Test that an empty quiz becomes a friendly error."""
        topic_flow.result = Quiz()
        result = create_quiz({"topic": "Space"})
        assert result.error == EMPTY_TOPIC_QUIZ

    def test_empty_quiz_error(self, topic_flow: RecordingFlow):
        """Test that EmptyQuizError becomes a friendly error."""
        topic_flow.result = EmptyQuizError("nothing")
        result = create_quiz({"topic": "Space"})
        assert result.error == EMPTY_TOPIC_QUIZ

    def test_unexpected_error(self, topic_flow: RecordingFlow, caplog):
        """Test that any other failure collapses to one message and is logged."""
        topic_flow.result = RuntimeError("connection reset")

        result = create_quiz({"topic": "Space"})

        assert result.error == UNEXPECTED_ERROR
        assert "Quiz generation failed" in caplog.text

    def test_invalid_model_output(self, stub_llm):
        """Test a model answer that isn't one of the options, end to end."""
        stub_llm.response = ValueError("Correct answer 'E' is not one of the options")
        result = create_quiz({"topic": "Space"})
        assert result.error == UNEXPECTED_ERROR

    def test_end_to_end_with_stub_model(self, stub_llm):
        """Test the action through the real flow."""
        result = create_quiz({"topic": "Space", "numberOfQuestions": "2"})

        assert result.ok
        assert result.data.total_questions == 2
        for question in result.data.questions:
            assert question.correct_answer in question.options


class TestCreateQuizFromPyq:
    """Test the PYQ action."""

    def test_success(self, pyq_flow: RecordingFlow):
        """Test a valid PYQ request."""
        result = create_quiz_from_pyq(
            {
                "exam": "NEET",
                "subject": "Biology",
                "topic": "Genetics",
                "numberOfQuestions": "5",
                "language": "Hindi",
            }
        )

        assert result.ok
        assert pyq_flow.kwargs == {
            "exam": "NEET",
            "subject": "Biology",
            "topic": "Genetics",
            "number_of_questions": 5,
            "language": "Hindi",
        }

    def test_error_order(self, pyq_flow: RecordingFlow):
        """Test exam, subject, topic, count priority."""
        assert create_quiz_from_pyq({}).error == "Please select an exam."
        assert create_quiz_from_pyq({"exam": "NEET"}).error == "Please select a subject."
        assert (
            create_quiz_from_pyq({"exam": "NEET", "subject": "Biology"}).error
            == "Topic must be at least 2 characters long."
        )
        assert (
            create_quiz_from_pyq(
                {"exam": "NEET", "subject": "Biology", "topic": "Genetics", "numberOfQuestions": "-1"}
            ).error
            == "You must request at least 1 question."
        )

    def test_empty_quiz(self, pyq_flow: RecordingFlow):
        """Test the PYQ empty message."""
        pyq_flow.result = Quiz()
        result = create_quiz_from_pyq({"exam": "NEET", "subject": "Biology", "topic": "Genetics"})
        assert result.error == EMPTY_PYQ_QUIZ


class TestCreateQuizFromContent:
    """Test the content action."""

    def test_success(self, content_flow: RecordingFlow, text_data_uri: str):
        """Test a valid upload."""
        result = create_quiz_from_content({"contentDataUri": text_data_uri, "numberOfQuestions": "4"})

        assert result.ok
        assert content_flow.kwargs["content_data_uri"] == text_data_uri
        assert content_flow.kwargs["number_of_questions"] == 4
        assert content_flow.kwargs["language"] == "English"

    def test_missing_content(self, content_flow: RecordingFlow):
        """Test that missing content is reported."""
        result = create_quiz_from_content({"numberOfQuestions": "0"})
        assert result.error == "File content is missing."

    def test_empty_quiz(self, content_flow: RecordingFlow, image_data_uri: str):
        """Test the content empty message."""
        content_flow.result = Quiz()
        result = create_quiz_from_content({"contentDataUri": image_data_uri})
        assert result.error == EMPTY_CONTENT_QUIZ

    def test_end_to_end_with_stub_model(self, stub_llm, image_data_uri: str):
        """Test the action through the real flow."""
        stub_llm.response = QuestionList(questions=stub_llm.response.questions[:1])
        result = create_quiz_from_content({"contentDataUri": image_data_uri, "numberOfQuestions": "1"})
        assert result.ok
        assert result.data.total_questions == 1

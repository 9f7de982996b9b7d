"""Shared plumbing for the quiz prompt flows."""

import logging
import time
from typing import Any

from langchain_anthropic import ChatAnthropic
from langchain_aws import ChatBedrock
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage

from src.config.settings import Settings, get_settings
from src.exceptions import EmptyQuizError
from src.models.quiz import QuestionList, Quiz, QuizMetadata

logger = logging.getLogger(__name__)


def question_instructions(language: str, question_hint: str = "") -> str:
    """
    Build the per-question requirements shared by every flow.

    Args:
        language: Language the quiz is written in
        question_hint: Extra wording for the question line (e.g. exam style)

    Returns:
        Instruction block to append to a flow's prompt
    """
    hint = f" {question_hint}" if question_hint else ""
    return f"""For each question, provide:
1.  A clear and concise question{hint}, in {language}.
2.  4 multiple-choice options, in {language}.
3.  The correct answer, in {language}. It must be copied exactly from one of the options.
4.  A detailed explanation for the correct answer to help with understanding, in {language}.

IMPORTANT: For any mathematical equations or values, present them in standard mathematical notation. DO NOT wrap mathematical expressions in dollar signs (e.g., use "x^2 + y^2 = r^2" instead of "$x^2 + y^2 = r^2$")."""


def get_chat_model(settings: Settings | None = None) -> BaseChatModel:
    """
    Create the chat model configured in settings.

    Args:
        settings: Settings to use (defaults to the cached settings)

    Returns:
        A LangChain chat model
    """
    settings = settings or get_settings()

    if settings.model_provider == "anthropic":
        kwargs: dict[str, Any] = {}
        if settings.anthropic_api_key:
            kwargs["api_key"] = settings.anthropic_api_key
        return ChatAnthropic(
            model=settings.model_name,
            temperature=settings.generation_temperature,
            **kwargs,
        )

    kwargs = {}
    if settings.aws_default_region:
        kwargs["region_name"] = settings.aws_default_region
    return ChatBedrock(
        model=settings.model_name,
        temperature=settings.generation_temperature,
        **kwargs,
    )


def run_quiz_prompt(messages: list[BaseMessage], metadata: QuizMetadata) -> Quiz:
    """
    Send a prompt to the model and turn its structured output into a Quiz.

    Args:
        messages: System and user messages for the model
        metadata: Request metadata to attach to the quiz

    Returns:
        Quiz with at most the requested number of questions

    Raises:
        EmptyQuizError: If the model returned no questions
    """
    settings = get_settings()
    llm = get_chat_model(settings)

    # Structured output validates every question, including the correct-answer check
    llm_with_structure = llm.with_structured_output(QuestionList)

    logger.info(
        "Requesting %s %s question(s) in %s from %s",
        metadata.requested_questions,
        metadata.source.value,
        metadata.language,
        settings.model_name,
    )
    started = time.perf_counter()
    question_list = llm_with_structure.invoke(messages)
    elapsed = time.perf_counter() - started

    if question_list is None or not question_list.questions:
        raise EmptyQuizError("The model returned no questions")

    questions = question_list.questions
    if metadata.requested_questions and len(questions) > metadata.requested_questions:
        logger.debug(
            "Model returned %d questions, keeping the first %d",
            len(questions),
            metadata.requested_questions,
        )
        questions = questions[: metadata.requested_questions]

    metadata.model_used = settings.model_name
    metadata.generation_time_seconds = elapsed
    logger.info("Generated %d question(s) in %.1fs", len(questions), elapsed)

    return Quiz(questions=questions, metadata=metadata)

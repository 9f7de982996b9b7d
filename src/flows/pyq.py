"""PYQ flow - Generates a quiz in the style of past competitive exam papers."""

from langchain_core.messages import HumanMessage, SystemMessage

from src.flows.base import question_instructions, run_quiz_prompt
from src.models.quiz import Quiz, QuizMetadata, QuizSource


def generate_quiz_from_pyq(
    exam: str,
    subject: str,
    topic: str,
    number_of_questions: int,
    language: str,
) -> Quiz:
    """
    Generate Previous Year Question (PYQ) style questions for an exam.

    Args:
        exam: The Indian competitive exam the questions should follow
        subject: Exam subject
        topic: Topic within the subject
        number_of_questions: How many questions to ask for
        language: Quiz language

    Returns:
        The generated Quiz
    """
    system_prompt = (
        "You are an expert at creating educational quizzes based on Previous Year "
        "Questions (PYQs) for major Indian competitive exams."
    )

    user_prompt = f"""Your task is to generate {number_of_questions} important and relevant questions in {language} based on the patterns and topics from past papers for the specified exam.

Exam: {exam}
Subject: {subject}
Topic: {topic}

{question_instructions(language, "that reflects the style and difficulty of the exam")}"""

    messages = [
        SystemMessage(content=system_prompt),
        HumanMessage(content=user_prompt),
    ]

    metadata = QuizMetadata(
        source=QuizSource.PYQ,
        topic=topic,
        exam=exam,
        subject=subject,
        language=language,
        requested_questions=number_of_questions,
    )
    return run_quiz_prompt(messages, metadata)

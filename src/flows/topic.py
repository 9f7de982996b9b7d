"""Topic flow - Generates a quiz on a free-text topic."""

from langchain_core.messages import HumanMessage, SystemMessage

from src.flows.base import question_instructions, run_quiz_prompt
from src.models.quiz import QuestionDifficulty, Quiz, QuizMetadata, QuizSource


def generate_quiz_questions(
    topic: str,
    number_of_questions: int,
    language: str,
    difficulty: QuestionDifficulty = QuestionDifficulty.MEDIUM,
) -> Quiz:
    """
    Generate multiple choice questions on a topic.

    Args:
        topic: The topic for which to generate quiz questions
        number_of_questions: How many questions to ask for
        language: Quiz language (e.g. "English", "Hindi")
        difficulty: Difficulty level of the quiz

    Returns:
        The generated Quiz
    """
    system_prompt = "You are an expert at creating educational quizzes in multiple languages."

    user_prompt = f"""Your task is to generate {number_of_questions} important and relevant questions on the given topic in {language} with a difficulty level of {difficulty.value}.

Topic: {topic}

{question_instructions(language)}"""

    messages = [
        SystemMessage(content=system_prompt),
        HumanMessage(content=user_prompt),
    ]

    metadata = QuizMetadata(
        source=QuizSource.TOPIC,
        topic=topic,
        language=language,
        difficulty=difficulty,
        requested_questions=number_of_questions,
    )
    return run_quiz_prompt(messages, metadata)

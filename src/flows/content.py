"""Content flow - Generates a quiz from an uploaded file or image."""

from typing import Any

from langchain_core.messages import HumanMessage, SystemMessage

from src.config.settings import get_settings
from src.content.data_uri import DataUri, parse_data_uri
from src.exceptions import ContentError
from src.flows.base import question_instructions, run_quiz_prompt
from src.models.quiz import Quiz, QuizMetadata, QuizSource


def build_content_message(content: DataUri, content_data_uri: str, task: str) -> HumanMessage:
    """
    Build the user message carrying the uploaded content.

    Images are attached as an image block; text is embedded in the prompt.
    Any other content type is rejected.

    Args:
        content: Parsed content
        content_data_uri: The original data URI (sent as-is for images)
        task: Instructions to put before the content

    Returns:
        HumanMessage for the model

    Raises:
        ContentError: If the content is neither an image nor text
    """
    if content.is_image:
        blocks: list[dict[str, Any]] = [
            {"type": "text", "text": f"{task}\n\nContent: see the attached image."},
            {"type": "image_url", "image_url": {"url": content_data_uri}},
        ]
        return HumanMessage(content=blocks)

    if content.is_text:
        return HumanMessage(content=f"{task}\n\nContent:\n{content.text()}")

    raise ContentError(
        f"Unsupported content type: {content.mime_type}. Upload an image or a text file.",
        mime_type=content.mime_type,
    )


def generate_quiz_from_content(
    content_data_uri: str,
    number_of_questions: int,
    language: str,
) -> Quiz:
    """
    Generate questions from content supplied as a base64 data URI.

    Args:
        content_data_uri: 'data:<mimetype>;base64,<encoded_data>'
        number_of_questions: How many questions to ask for
        language: Quiz language

    Returns:
        The generated Quiz
    """
    content = parse_data_uri(content_data_uri, max_bytes=get_settings().max_upload_bytes)

    system_prompt = (
        "You are an expert at creating educational quizzes in multiple languages "
        "from provided content."
    )

    task = f"""Your task is to analyze the following content and generate {number_of_questions} important and relevant questions in {language}.

{question_instructions(language, "based on the content")}
Explanations should reference the provided content."""

    messages = [
        SystemMessage(content=system_prompt),
        build_content_message(content, content_data_uri, task),
    ]

    metadata = QuizMetadata(
        source=QuizSource.CONTENT,
        topic=f"Uploaded {content.mime_type}",
        language=language,
        requested_questions=number_of_questions,
    )
    return run_quiz_prompt(messages, metadata)

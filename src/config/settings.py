"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Model Configuration
    model_provider: Literal["bedrock", "anthropic"] = Field(
        default="bedrock",
        description="Chat model provider",
        validation_alias="MODEL_PROVIDER",
    )
    model_name: str = Field(
        default="anthropic.claude-3-7-sonnet-20250219-v1:0",
        description="Model to use (AWS Bedrock model ID or Anthropic model name)",
        validation_alias="MODEL_NAME",
    )
    generation_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for question generation",
        validation_alias="GENERATION_TEMPERATURE",
    )

    # AWS CONFIG (only needed for the bedrock provider)
    aws_access_key_id: str | None = Field(
        default=None,
        description="AWS API key ID",
        validation_alias="AWS_ACCESS_KEY_ID",
    )
    aws_secret_access_key: str | None = Field(
        default=None,
        description="AWS API key",
        validation_alias="AWS_SECRET_ACCESS_KEY",
    )
    aws_default_region: str | None = Field(
        default=None,
        description="AWS API region",
        validation_alias="AWS_DEFAULT_REGION",
    )

    # Anthropic (only needed for the anthropic provider)
    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key",
        validation_alias="ANTHROPIC_API_KEY",
    )

    # Form limits
    topic_min_length: int = Field(
        default=2,
        ge=1,
        description="Shortest accepted topic",
        validation_alias="TOPIC_MIN_LENGTH",
    )
    topic_max_length: int = Field(
        default=50,
        ge=1,
        description="Longest accepted topic",
        validation_alias="TOPIC_MAX_LENGTH",
    )
    max_questions: int = Field(
        default=50,
        ge=1,
        le=200,
        description="Maximum number of questions per quiz",
        validation_alias="MAX_QUESTIONS",
    )
    default_question_count: int = Field(
        default=10,
        ge=1,
        description="Number of questions when none is requested",
        validation_alias="DEFAULT_QUESTION_COUNT",
    )
    default_language: str = Field(
        default="English",
        description="Quiz language when none is requested",
        validation_alias="DEFAULT_LANGUAGE",
    )
    default_difficulty: str = Field(
        default="Medium",
        description="Quiz difficulty when none is requested",
        validation_alias="DEFAULT_DIFFICULTY",
    )
    max_timer_minutes: int = Field(
        default=120,
        ge=0,
        description="Longest allowed quiz timer in minutes",
        validation_alias="MAX_TIMER_MINUTES",
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        description="Largest decoded upload accepted for content quizzes",
        validation_alias="MAX_UPLOAD_BYTES",
    )

    # Session
    require_unlock: bool = Field(
        default=False,
        description="Show the unlock step between generation and play",
        validation_alias="REQUIRE_UNLOCK",
    )
    share_url: str | None = Field(
        default=None,
        description="Link appended to the share message",
        validation_alias="SHARE_URL",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Root log level",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "protected_namespaces": (),
    }


# Loaded once and reused by the forms, flows and session
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()

"""Configuration settings for Stack Advisor."""

# Load .env into os.environ so provider fallbacks (e.g. GOOGLE_API_KEY) work
from dotenv import load_dotenv

load_dotenv()

import os
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for Stack Advisor.

    Settings can be overridden via environment variables with STACK_ADVISOR_ prefix.
    Example: STACK_ADVISOR_DEFAULT_PROVIDER=gemini
    """

    # Strategy
    default_provider: str = Field(
        default="openai",
        description="Provider used when a request does not name one (local, openai, gemini)"
    )

    # Model config
    openai_model: str = Field(
        default="gpt-3.5-turbo",
        description="OpenAI chat model for recommendations"
    )
    gemini_model: str = Field(
        default="gemini-pro",
        description="Gemini model for recommendations"
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for LLM calls"
    )
    max_tokens: int = Field(
        default=2500,
        description="Maximum tokens in an LLM recommendation reply"
    )
    llm_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Seconds before an LLM call is abandoned and the rule engine takes over"
    )

    # API settings (env: STACK_ADVISOR_<KEY> or standard env var)
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key (env: STACK_ADVISOR_OPENAI_API_KEY or OPENAI_API_KEY)",
    )
    google_api_key: str = Field(
        default="",
        description="Google/Gemini API key (env: STACK_ADVISOR_GOOGLE_API_KEY or GOOGLE_API_KEY)",
    )

    # Validation
    strict_validation: bool = Field(
        default=False,
        description="Reject unknown feature tags and labels instead of logging a warning"
    )

    # Service
    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI and the HTTP app"
    )
    cors_origins: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of allowed CORS origins"
    )

    model_config = {
        "env_prefix": "STACK_ADVISOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def get_openai_api_key(self) -> str:
        """OpenAI key from settings, falling back to the standard env var."""
        return self.openai_api_key or os.environ.get("OPENAI_API_KEY", "")

    def get_google_api_key(self) -> str:
        """Gemini key from settings, falling back to GOOGLE_API_KEY / GEMINI_API_KEY."""
        return (
            self.google_api_key
            or os.environ.get("GOOGLE_API_KEY", "")
            or os.environ.get("GEMINI_API_KEY", "")
        )


# Create singleton instance
settings = Settings()

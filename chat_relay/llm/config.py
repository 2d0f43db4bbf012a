"""Completion provider configuration with environment variable loading.

Pydantic-based configuration for the OpenAI Responses relay.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


class LLMConfig(BaseModel):
    """Configuration for the chat and file relay.

    Attributes:
        api_key: API key for the completion provider.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier to use.
        reasoning_effort: Reasoning effort requested from reasoning models.
        verbosity: Output verbosity requested from the model.
        default_system_prompt: Instructions used when the chat has no system message.
        max_upload_bytes: Largest decoded file accepted by the upload relay.
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("OPENAI_API_KEY", ""),
        description="API key for the completion provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("OPENAI_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-5-mini"),
        description="Model to use",
    )
    reasoning_effort: Literal["minimal", "low", "medium", "high"] | None = Field(
        default_factory=lambda: os.getenv("LLM_REASONING_EFFORT", "minimal") or None,
        description="Reasoning effort (None to omit)",
    )
    verbosity: Literal["low", "medium", "high"] | None = Field(
        default_factory=lambda: os.getenv("LLM_VERBOSITY", "low") or None,
        description="Text verbosity (None to omit)",
    )
    default_system_prompt: str = Field(
        default_factory=lambda: os.getenv("DEFAULT_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT),
    )
    max_upload_bytes: int = Field(
        default_factory=lambda: int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))),
        ge=1,
        description="Maximum decoded upload size in bytes",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set OPENAI_API_KEY in .env")
        return v.strip()


def get_llm_config() -> LLMConfig:
    """Create relay configuration from environment.

    Returns:
        Configured LLMConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return LLMConfig()

"""Client configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()


class ClientConfig(BaseModel):
    """Settings for talking to Supabase and the relay server.

    Attributes:
        supabase_url: Supabase project URL.
        supabase_anon_key: Public anon key; row-level security applies.
        api_base_url: Base URL of the relay server.
        request_timeout: Seconds before relay requests time out.
    """

    model_config = ConfigDict(validate_default=True)

    supabase_url: str = Field(default_factory=lambda: os.getenv("SUPABASE_URL", ""))
    supabase_anon_key: str = Field(default_factory=lambda: os.getenv("SUPABASE_ANON_KEY", ""))
    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:3000"),
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "120")),
        gt=0,
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment."""
    return ClientConfig()

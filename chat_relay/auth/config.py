"""Supabase configuration for server-side token verification."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

load_dotenv()


class SupabaseConfig(BaseModel):
    """Connection settings for the Supabase project.

    Attributes:
        url: Project URL, e.g. ``https://<ref>.supabase.co``.
        service_key: Service role key used to look up users by token.
    """

    model_config = ConfigDict(validate_default=True)

    url: str = Field(default_factory=lambda: os.getenv("SUPABASE_URL", ""))
    service_key: str = Field(default_factory=lambda: os.getenv("SUPABASE_SERVICE_KEY", ""))

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Supabase URL required. Set SUPABASE_URL in .env")
        return v.rstrip("/")

    @field_validator("service_key")
    @classmethod
    def validate_service_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Supabase key required. Set SUPABASE_SERVICE_KEY in .env")
        return v.strip()


def get_supabase_config() -> SupabaseConfig:
    """Create Supabase configuration from environment.

    Raises:
        ValueError: If the URL or key is missing.
    """
    return SupabaseConfig()

"""Request authentication against Supabase Auth."""

from chat_relay.auth.config import SupabaseConfig, get_supabase_config
from chat_relay.auth.verifier import (
    InvalidTokenError,
    TokenVerifier,
    extract_bearer_token,
    get_token_verifier,
)

__all__ = [
    "InvalidTokenError",
    "SupabaseConfig",
    "TokenVerifier",
    "extract_bearer_token",
    "get_supabase_config",
    "get_token_verifier",
]

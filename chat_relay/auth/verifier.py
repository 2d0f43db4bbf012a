"""Bearer token verification against Supabase Auth."""

import logging

from supabase import Client, create_client

from chat_relay.auth.config import SupabaseConfig, get_supabase_config
from chat_relay.models.schemas import AuthUser

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class InvalidTokenError(Exception):
    """Raised when a token is missing or Supabase does not recognise it."""

    pass


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token part of an ``Authorization`` header value.

    Returns an empty string when the header is absent or carries no token.
    """
    if not authorization:
        return ""
    return authorization.removeprefix(BEARER_PREFIX).strip()


class TokenVerifier:
    """Resolves access tokens to users through the Supabase Auth API."""

    def __init__(
        self,
        config: SupabaseConfig | None = None,
        client: Client | None = None,
    ) -> None:
        """Build a verifier around an existing client or one created from config.

        Raises:
            ValueError: If Supabase is not configured or the client cannot be created.
        """
        if client is None:
            config = config or get_supabase_config()
            try:
                client = create_client(config.url, config.service_key)
            except Exception as e:
                raise ValueError(f"Supabase client could not be created: {e}") from e
        self._client = client

    def verify(self, token: str) -> AuthUser:
        """Return the user that owns ``token``.

        Raises:
            InvalidTokenError: If the token is empty, rejected, or cannot be checked.
        """
        if not token:
            raise InvalidTokenError("No token provided")

        try:
            response = self._client.auth.get_user(token)
        except Exception as e:
            raise InvalidTokenError(f"Token rejected: {e}") from e

        user = response.user if response else None
        if user is None:
            raise InvalidTokenError("No user for token")

        return AuthUser(id=str(user.id), email=user.email)


_verifier: TokenVerifier | None = None


def get_token_verifier() -> TokenVerifier:
    """Get or create the global token verifier.

    Raises:
        ValueError: If Supabase is not configured.
    """
    global _verifier
    if _verifier is None:
        _verifier = TokenVerifier()
    return _verifier

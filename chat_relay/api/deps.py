"""FastAPI dependencies shared by the relay routes.

Services are resolved through these functions so tests can replace them
with ``app.dependency_overrides``.
"""

import logging

from fastapi import Header, HTTPException, status

from chat_relay.auth.verifier import InvalidTokenError, extract_bearer_token, get_token_verifier
from chat_relay.llm.chat_relay import ChatRelayService, get_chat_service
from chat_relay.llm.files import FileRelayService, get_file_service
from chat_relay.models.schemas import AuthUser

logger = logging.getLogger(__name__)


def get_current_user(authorization: str | None = Header(None)) -> AuthUser:
    """Authenticate the request's bearer token.

    Declared sync so the blocking Supabase call runs in the threadpool.

    Raises:
        HTTPException: 401 if the token is missing or invalid,
            500 if token verification is not configured.
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
        )

    try:
        verifier = get_token_verifier()
    except ValueError as e:
        logger.error(f"Token verification unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication service not configured",
        ) from e

    try:
        return verifier.verify(token)
    except InvalidTokenError as e:
        logger.warning(f"Rejected token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        ) from e


def chat_service() -> ChatRelayService:
    """Resolve the chat relay service.

    Raises:
        HTTPException: 500 if the completion provider is not configured.
    """
    try:
        return get_chat_service()
    except ValueError as e:
        logger.error(f"Chat service unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Chat failed",
        ) from e


def file_service() -> FileRelayService:
    """Resolve the file relay service.

    Raises:
        HTTPException: 500 if the completion provider is not configured.
    """
    try:
        return get_file_service()
    except ValueError as e:
        logger.error(f"File service unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="File service not configured",
        ) from e

"""HTTP client for the relay server's chat and upload endpoints."""

import base64
import json
import logging
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx

from chat_relay.client.config import ClientConfig, get_client_config
from chat_relay.models.schemas import ChatMessage, UploadResponse

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str | None]

DATA_PREFIX = "data: "
DONE_MARKER = "[DONE]"


class RelayError(Exception):
    """Raised when the relay server rejects a request or reports a failure."""

    pass


class RelayAPIClient:
    """Calls the relay endpoints with the signed-in user's bearer token."""

    def __init__(
        self,
        token_provider: TokenProvider,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token_provider: Returns the current access token, usually
                ``SupabaseStore.get_token``.
            config: Optional client configuration. Loads from environment if not provided.
            transport: Optional httpx transport, e.g. for in-process testing.
        """
        self._token_provider = token_provider
        self._config = config or get_client_config()
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        token = self._token_provider()
        if not token:
            raise RelayError("Not signed in")
        return {"Authorization": f"Bearer {token}"}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        )

    async def stream_chat(
        self,
        messages: list[ChatMessage],
        project_id: str,
    ) -> AsyncGenerator[str]:
        """Consume the SSE stream from /api/chat.

        Args:
            messages: Conversation to send, system message first if any.
            project_id: Project the conversation belongs to.

        Yields:
            Content deltas in arrival order.

        Raises:
            RelayError: On a non-success status, an error event, or a connection failure.
        """
        headers = self._headers()
        payload = {
            "messages": [m.model_dump() for m in messages],
            "projectId": project_id,
        }

        async with self._client() as client:
            try:
                async with client.stream(
                    "POST",
                    "/api/chat",
                    json=payload,
                    headers={**headers, "Accept": "text/event-stream"},
                ) as response:
                    if response.is_error:
                        raise RelayError("Chat request failed")

                    async for line in response.aiter_lines():
                        if not line.startswith(DATA_PREFIX):
                            continue
                        data = line[len(DATA_PREFIX):]
                        if data == DONE_MARKER:
                            return
                        try:
                            event = json.loads(data)
                        except json.JSONDecodeError:
                            logger.debug(f"Skipping unparsable event: {data!r}")
                            continue
                        if not isinstance(event, dict):
                            continue
                        if error := event.get("error"):
                            raise RelayError(str(error))
                        if content := event.get("content"):
                            yield content
            except httpx.RequestError as e:
                raise RelayError(f"Connection failed: {e}") from e

    async def upload_file(
        self,
        project_id: str,
        filename: str,
        data: bytes,
    ) -> UploadResponse:
        """Send file bytes to /api/upload as base64.

        Raises:
            RelayError: If the relay rejects the upload or cannot be reached.
        """
        headers = self._headers()
        payload = {
            "filename": filename,
            "content": base64.b64encode(data).decode("ascii"),
            "projectId": project_id,
        }

        async with self._client() as client:
            try:
                response = await client.post("/api/upload", json=payload, headers=headers)
            except httpx.RequestError as e:
                raise RelayError(f"Connection failed: {e}") from e

        if response.is_error:
            raise RelayError("Upload failed")
        return UploadResponse.model_validate(response.json())

    async def get_file(self, file_id: str) -> dict[str, Any]:
        """Fetch provider metadata for a file through /api/file/{id}."""
        headers = self._headers()

        async with self._client() as client:
            try:
                response = await client.get(f"/api/file/{file_id}", headers=headers)
            except httpx.RequestError as e:
                raise RelayError(f"Connection failed: {e}") from e

        if response.is_error:
            raise RelayError("Could not retrieve file")
        return response.json()

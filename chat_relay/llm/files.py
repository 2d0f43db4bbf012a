"""File relay to the OpenAI Files API."""

import logging
from typing import Any

from openai import AsyncOpenAI, OpenAIError
from openai.types import FileObject

from chat_relay.llm.config import LLMConfig, get_llm_config

logger = logging.getLogger(__name__)

FILE_PURPOSE = "assistants"


class FileRelayError(Exception):
    """Raised when the provider rejects or fails a file operation."""

    pass


class FileRelayService:
    """Uploads files to, and reads file metadata from, the completion provider."""

    def __init__(
        self,
        config: LLMConfig | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._config = config or get_llm_config()
        self._client = client or AsyncOpenAI(
            api_key=self._config.api_key,
            base_url=self._config.base_url,
        )

    @property
    def max_upload_bytes(self) -> int:
        return self._config.max_upload_bytes

    async def upload(self, filename: str, data: bytes) -> FileObject:
        """Upload raw bytes as a provider file.

        Args:
            filename: Name reported to the provider.
            data: Decoded file content.

        Returns:
            The provider's file object.

        Raises:
            FileRelayError: If the provider call fails.
        """
        try:
            uploaded = await self._client.files.create(
                file=(filename, data, "application/octet-stream"),
                purpose=FILE_PURPOSE,
            )
        except OpenAIError as e:
            raise FileRelayError(f"Upload of {filename} failed: {e}") from e

        logger.info(f"Uploaded {filename} ({len(data)} bytes) as {uploaded.id}")
        return uploaded

    async def retrieve(self, file_id: str) -> dict[str, Any]:
        """Fetch provider metadata for a file.

        Raises:
            FileRelayError: If the provider call fails.
        """
        try:
            file = await self._client.files.retrieve(file_id)
        except OpenAIError as e:
            raise FileRelayError(f"Retrieval of {file_id} failed: {e}") from e
        return file.model_dump()


_file_service: FileRelayService | None = None


def get_file_service() -> FileRelayService:
    """Get or create the global file relay service."""
    global _file_service
    if _file_service is None:
        _file_service = FileRelayService()
    return _file_service

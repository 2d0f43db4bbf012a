"""Completion provider relay.

Responsibilities:
    - Streaming chat completions through an Agno agent on the Responses API
    - Relaying file uploads and lookups to the OpenAI Files API
    - Probing which models the configured key can use

Maintains clean separation from the HTTP layer.
"""

from chat_relay.llm.chat_relay import ChatRelayError, ChatRelayService, get_chat_service
from chat_relay.llm.config import LLMConfig, get_llm_config
from chat_relay.llm.files import FileRelayError, FileRelayService, get_file_service

__all__ = [
    "ChatRelayError",
    "ChatRelayService",
    "FileRelayError",
    "FileRelayService",
    "LLMConfig",
    "get_chat_service",
    "get_file_service",
    "get_llm_config",
]

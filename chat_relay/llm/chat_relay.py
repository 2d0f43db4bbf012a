"""Agno-backed completion relay with streaming support.

Each chat request carries its own system prompt, so a lightweight Agno
agent is built per request around an OpenAI Responses model. The service
exposes only the text deltas of the run so the SSE endpoint can forward
them unchanged.
"""

import logging
from collections.abc import AsyncGenerator

from agno.agent import Agent
from agno.models.openai import OpenAIResponses

from chat_relay.llm.config import LLMConfig, get_llm_config

logger = logging.getLogger(__name__)

# Agno run event names
RUN_CONTENT_EVENT = "RunContent"
RUN_ERROR_EVENT = "RunError"


class ChatRelayError(Exception):
    """Raised when the completion provider fails mid-request."""

    pass


class ChatRelayService:
    """Service relaying prompts to the completion provider.

    Wraps Agno's Agent with:
    - Per-request instructions taken from the conversation's system prompt
    - Reasoning effort and verbosity from configuration
    - A plain text delta stream for SSE endpoints
    - Upstream failures normalised to ChatRelayError
    """

    def __init__(self, config: LLMConfig | None = None) -> None:
        """Initialize the relay service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_llm_config()

    @property
    def default_system_prompt(self) -> str:
        return self._config.default_system_prompt

    def _create_model(self) -> OpenAIResponses:
        """Create the Responses API model for one request.

        Returns:
            Configured OpenAIResponses instance.
        """
        options: dict[str, object] = {}
        if self._config.base_url:
            options["base_url"] = self._config.base_url
        if self._config.reasoning_effort:
            options["reasoning"] = {"effort": self._config.reasoning_effort}
        if self._config.verbosity:
            options["verbosity"] = self._config.verbosity

        return OpenAIResponses(
            id=self._config.model_name,
            api_key=self._config.api_key,
            **options,
        )

    def _create_agent(self, system_prompt: str) -> Agent:
        """Create a stateless agent carrying the request's instructions."""
        return Agent(
            model=self._create_model(),
            instructions=system_prompt,
            markdown=False,
        )

    async def stream_response(
        self,
        message: str,
        system_prompt: str,
    ) -> AsyncGenerator[str]:
        """Stream response text deltas for a prompt.

        Args:
            message: The latest user message.
            system_prompt: Instructions for the model.

        Yields:
            Non-empty text deltas as they arrive.

        Raises:
            ChatRelayError: If the provider fails before the stream completes.
        """
        try:
            agent = self._create_agent(system_prompt)
            async for event in agent.arun(message, stream=True):
                kind = getattr(event, "event", None)
                if kind == RUN_ERROR_EVENT:
                    raise ChatRelayError(str(getattr(event, "content", None) or "Run failed"))
                if kind == RUN_CONTENT_EVENT and event.content:
                    yield str(event.content)
        except ChatRelayError:
            raise
        except Exception as e:
            raise ChatRelayError(f"Completion stream failed: {e}") from e


# Module-level singleton instance
_chat_service: ChatRelayService | None = None


def get_chat_service() -> ChatRelayService:
    """Get or create the global chat relay service.

    Returns:
        The ChatRelayService instance.
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatRelayService()
    return _chat_service

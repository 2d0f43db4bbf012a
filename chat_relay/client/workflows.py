"""Multi-step client flows combining the Supabase store and the relay.

Store calls are blocking, so they run in a worker thread to keep the
event loop free while a reply streams.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

from chat_relay.client.api import RelayAPIClient
from chat_relay.client.store import SupabaseStore
from chat_relay.models.records import FileRecord, Message, Project
from chat_relay.models.schemas import ChatMessage

logger = logging.getLogger(__name__)


def build_chat_messages(
    project: Project,
    history: Sequence[Message | ChatMessage],
    text: str,
) -> list[ChatMessage]:
    """Assemble the message list sent to /api/chat.

    The project's system prompt goes first when set, then the prior
    conversation, then the new user message.
    """
    messages: list[ChatMessage] = []
    if project.system_prompt:
        messages.append(ChatMessage(role="system", content=project.system_prompt))
    messages.extend(ChatMessage(role=m.role, content=m.content) for m in history)
    messages.append(ChatMessage(role="user", content=text))
    return messages


async def send_chat_message(
    store: SupabaseStore,
    api: RelayAPIClient,
    conversation_id: str,
    project: Project,
    history: Sequence[Message | ChatMessage],
    text: str,
    on_chunk: Callable[[str], None] | None = None,
) -> str:
    """Persist a user message, stream the reply, and persist the reply.

    Args:
        store: Supabase data access.
        api: Relay client.
        conversation_id: Conversation receiving both messages.
        project: Project supplying the system prompt.
        history: Messages already in the conversation, oldest first.
        text: The new user message.
        on_chunk: Called with each content delta as it arrives.

    Returns:
        The complete assistant reply.

    Raises:
        RelayError: If the relay fails; the user message stays saved.
    """
    await asyncio.to_thread(store.save_message, conversation_id, "user", text)

    parts: list[str] = []
    async for chunk in api.stream_chat(build_chat_messages(project, history, text), project.id):
        parts.append(chunk)
        if on_chunk is not None:
            on_chunk(chunk)

    reply = "".join(parts)
    await asyncio.to_thread(store.save_message, conversation_id, "assistant", reply)
    return reply


async def upload_project_file(
    store: SupabaseStore,
    api: RelayAPIClient,
    project_id: str,
    filename: str,
    data: bytes,
) -> FileRecord:
    """Upload a file through the relay and record it against the project."""
    result = await api.upload_file(project_id, filename, data)
    record = await asyncio.to_thread(store.record_file, project_id, filename, result.file_id)
    logger.info(f"Recorded {filename} as {result.file_id} for project {project_id}")
    return record

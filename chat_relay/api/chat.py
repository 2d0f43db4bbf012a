"""Chat relay endpoint streaming completions as server-sent events.

Wire format:
    data: {"content": "<delta>"}   one event per text delta
    data: [DONE]                   after a successful completion
    data: {"error": "Chat failed"} instead of [DONE] when the provider fails
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from chat_relay.api.deps import chat_service, get_current_user
from chat_relay.llm.chat_relay import ChatRelayError, ChatRelayService
from chat_relay.models.schemas import AuthUser, ChatRequest, ErrorResponse, StreamChunk, StreamError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}
DONE_EVENT = "data: [DONE]\n\n"


def format_event(payload: BaseModel) -> str:
    """Serialize a model as a single SSE ``data`` event."""
    return f"data: {payload.model_dump_json()}\n\n"


async def relay_stream(
    service: ChatRelayService,
    message: str,
    system_prompt: str,
) -> AsyncGenerator[str]:
    """Forward provider deltas as SSE events, ending with [DONE] or an error event."""
    try:
        async for delta in service.stream_response(message, system_prompt):
            yield format_event(StreamChunk(content=delta))
    except ChatRelayError as e:
        logger.error(f"Chat error: {e}")
        yield format_event(StreamError(error="Chat failed"))
        return

    yield DONE_EVENT


@router.post(
    "/chat",
    response_class=StreamingResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def chat(
    request: ChatRequest,
    user: AuthUser = Depends(get_current_user),
    service: ChatRelayService = Depends(chat_service),
) -> StreamingResponse:
    """Relay a conversation to the completion provider and stream the reply.

    The system message (if any) becomes the model instructions and the
    latest user message becomes the input.

    Raises:
        400: Messages or projectId missing.
        401: Missing or invalid bearer token.
    """
    if not request.messages or not request.project_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Messages and projectId required",
        )

    system_prompt = request.system_prompt(service.default_system_prompt)
    message = request.last_user_message()

    logger.info(
        f"Chat request from user {user.id} for project {request.project_id} "
        f"({len(request.messages)} messages)"
    )

    return StreamingResponse(
        relay_stream(service, message, system_prompt),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )

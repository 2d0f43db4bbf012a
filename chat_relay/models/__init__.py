"""Pydantic models for API requests, responses and stored records.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - ChatMessage / ChatRequest: Chat relay payload
    - StreamChunk / StreamError: Server-sent event bodies
    - UploadRequest / UploadResponse: File relay payloads
    - AuthUser: Identity behind a verified token
    - Project, Conversation, Message, FileRecord: Supabase rows
"""

from chat_relay.models.records import Conversation, FileRecord, Message, Project
from chat_relay.models.schemas import (
    AuthUser,
    ChatMessage,
    ChatRequest,
    ErrorResponse,
    StreamChunk,
    StreamError,
    UploadRequest,
    UploadResponse,
)

__all__ = [
    "AuthUser",
    "ChatMessage",
    "ChatRequest",
    "Conversation",
    "ErrorResponse",
    "FileRecord",
    "Message",
    "Project",
    "StreamChunk",
    "StreamError",
    "UploadRequest",
    "UploadResponse",
]

"""Pydantic models for relay requests, responses and stream events."""

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        role: The speaker identifier (user, assistant, or system).
        content: The message text.
    """

    role: str
    content: str = ""


class ChatRequest(BaseModel):
    """Request payload for the chat relay endpoint.

    Both fields are optional at the schema level so the route can answer
    with its own 400 message when either is missing or empty.

    Attributes:
        messages: Conversation so far, including an optional system message.
        project_id: Project the conversation belongs to (``projectId`` on the wire).
    """

    # Supabase bigint keys arrive as numbers
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    messages: list[ChatMessage] | None = None
    project_id: str | None = Field(None, alias="projectId")

    def system_prompt(self, default: str) -> str:
        """Return the first system message content, or ``default``."""
        for message in self.messages or []:
            if message.role == "system":
                return message.content or default
        return default

    def last_user_message(self) -> str:
        """Return the content of the most recent user message, or ``""``."""
        for message in reversed(self.messages or []):
            if message.role == "user":
                return message.content
        return ""


class StreamChunk(BaseModel):
    """A content delta forwarded over the SSE stream."""

    content: str


class StreamError(BaseModel):
    """Terminal error event written when the upstream stream fails."""

    error: str


class UploadRequest(BaseModel):
    """Request payload for the file upload relay.

    Attributes:
        filename: Original file name.
        content: Base64-encoded file bytes.
        project_id: Owning project (``projectId`` on the wire).
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    filename: str | None = None
    content: str | None = None
    project_id: str | None = Field(None, alias="projectId")


class UploadResponse(BaseModel):
    """Response after a file has been relayed to the completion provider.

    Attributes:
        success: Whether the upload succeeded.
        file_id: Provider file identifier (``fileId`` on the wire).
        filename: Name of the uploaded file.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    file_id: str = Field(..., alias="fileId")
    filename: str


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""

    error: str


class AuthUser(BaseModel):
    """Identity resolved from a verified bearer token."""

    id: str
    email: str | None = None

"""Records stored in the Supabase tables.

Rows come back from PostgREST as dicts; these models give the client
typed access without enforcing any relationships locally.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    # PostgREST returns bigint keys as numbers
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    created_at: str | None = None


class Project(_Record):
    """A user's project with its system prompt.

    Attributes:
        name: Display name.
        system_prompt: Instructions sent with every chat in the project.
        user_id: Owner of the project.
    """

    name: str
    system_prompt: str | None = None
    user_id: str | None = None


class Conversation(_Record):
    """A conversation thread within a project."""

    project_id: str
    title: str = Field(default="New Conversation")


class Message(_Record):
    """A persisted chat message."""

    conversation_id: str
    role: str
    content: str


class FileRecord(_Record):
    """Reference from a project to a file held by the completion provider."""

    project_id: str
    filename: str
    openai_file_id: str

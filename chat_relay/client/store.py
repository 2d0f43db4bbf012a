"""Direct data access to Supabase for auth, projects, conversations and files.

Every call goes straight to the hosted backend with the anon key and the
signed-in user's session; row-level security on the Supabase side decides
what each user can see. Nothing is validated or cached locally.
"""

import logging
from typing import Any

from supabase import AuthError, Client, PostgrestAPIError, create_client

from chat_relay.client.config import ClientConfig, get_client_config
from chat_relay.models.records import Conversation, FileRecord, Message, Project
from chat_relay.models.schemas import AuthUser

logger = logging.getLogger(__name__)

DEFAULT_CONVERSATION_TITLE = "New Conversation"


class StoreError(Exception):
    """Raised when Supabase rejects a request."""

    pass


class SupabaseStore:
    """Thin wrapper over the Supabase client for the chat workspace tables."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: Client | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            config: Optional client configuration. Loads from environment if not provided.
            client: Optional preconfigured Supabase client.

        Raises:
            ValueError: If no client is given and the URL or anon key is missing.
        """
        if client is None:
            config = config or get_client_config()
            if not config.supabase_url or not config.supabase_anon_key:
                raise ValueError(
                    "Supabase URL and anon key required. "
                    "Set SUPABASE_URL and SUPABASE_ANON_KEY in .env"
                )
            client = create_client(config.supabase_url, config.supabase_anon_key)
        self._client = client

    def _execute(self, query: Any, action: str) -> list[dict[str, Any]]:
        try:
            response = query.execute()
        except PostgrestAPIError as e:
            raise StoreError(f"{action} failed: {e.message}") from e
        return response.data or []

    # Auth

    def login(self, email: str, password: str) -> AuthUser:
        """Sign in with email and password, keeping the session on the client."""
        try:
            response = self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as e:
            raise StoreError(f"Login failed: {e}") from e
        if response.user is None:
            raise StoreError("Login failed: no user returned")
        return AuthUser(id=str(response.user.id), email=response.user.email)

    def register(self, email: str, password: str) -> AuthUser | None:
        """Create an account.

        Returns None when the provider withholds the user until email confirmation.
        """
        try:
            response = self._client.auth.sign_up({"email": email, "password": password})
        except AuthError as e:
            raise StoreError(f"Registration failed: {e}") from e
        if response.user is None:
            return None
        return AuthUser(id=str(response.user.id), email=response.user.email)

    def logout(self) -> None:
        self._client.auth.sign_out()

    def has_session(self) -> bool:
        return self._client.auth.get_session() is not None

    def get_user(self) -> AuthUser | None:
        """Return the signed-in user, or None."""
        try:
            response = self._client.auth.get_user()
        except AuthError as e:
            logger.debug(f"No current user: {e}")
            return None
        if response is None or response.user is None:
            return None
        return AuthUser(id=str(response.user.id), email=response.user.email)

    def get_token(self) -> str | None:
        """Return the access token of the current session, or None."""
        session = self._client.auth.get_session()
        return session.access_token if session else None

    # Projects

    def list_projects(self) -> list[Project]:
        rows = self._execute(
            self._client.table("projects").select("*").order("created_at", desc=True),
            "List projects",
        )
        return [Project.model_validate(row) for row in rows]

    def create_project(self, name: str, system_prompt: str) -> Project:
        """Create a project owned by the signed-in user.

        Raises:
            StoreError: If nobody is signed in or the insert fails.
        """
        user = self.get_user()
        if user is None:
            raise StoreError("Create project failed: not signed in")

        rows = self._execute(
            self._client.table("projects").insert(
                [{"name": name, "system_prompt": system_prompt, "user_id": user.id}]
            ),
            "Create project",
        )
        return Project.model_validate(rows[0])

    def delete_project(self, project_id: str) -> None:
        self._execute(
            self._client.table("projects").delete().eq("id", project_id),
            "Delete project",
        )

    def get_project(self, project_id: str) -> Project:
        try:
            response = (
                self._client.table("projects").select("*").eq("id", project_id).single().execute()
            )
        except PostgrestAPIError as e:
            raise StoreError(f"Get project failed: {e.message}") from e
        return Project.model_validate(response.data)

    # Conversations and messages

    def create_conversation(self, project_id: str) -> str:
        """Create an empty conversation and return its id."""
        rows = self._execute(
            self._client.table("conversations").insert(
                [{"project_id": project_id, "title": DEFAULT_CONVERSATION_TITLE}]
            ),
            "Create conversation",
        )
        return str(rows[0]["id"])

    def list_conversations(self, project_id: str) -> list[Conversation]:
        rows = self._execute(
            self._client.table("conversations")
            .select("*")
            .eq("project_id", project_id)
            .order("created_at", desc=True),
            "List conversations",
        )
        return [Conversation.model_validate(row) for row in rows]

    def load_messages(self, conversation_id: str) -> list[Message]:
        rows = self._execute(
            self._client.table("messages")
            .select("*")
            .eq("conversation_id", conversation_id)
            .order("created_at", desc=False),
            "Load messages",
        )
        return [Message.model_validate(row) for row in rows]

    def save_message(self, conversation_id: str, role: str, content: str) -> None:
        self._execute(
            self._client.table("messages").insert(
                [{"conversation_id": conversation_id, "role": role, "content": content}]
            ),
            "Save message",
        )

    # Files

    def record_file(self, project_id: str, filename: str, openai_file_id: str) -> FileRecord:
        """Store a reference to a file uploaded through the relay."""
        rows = self._execute(
            self._client.table("files").insert(
                [
                    {
                        "project_id": project_id,
                        "filename": filename,
                        "openai_file_id": openai_file_id,
                    }
                ]
            ),
            "Record file",
        )
        return FileRecord.model_validate(rows[0])

    def list_files(self, project_id: str) -> list[FileRecord]:
        rows = self._execute(
            self._client.table("files")
            .select("*")
            .eq("project_id", project_id)
            .order("created_at", desc=True),
            "List files",
        )
        return [FileRecord.model_validate(row) for row in rows]

"""Client-side data access.

Responsibilities:
    - Supabase auth and CRUD for projects, conversations, messages and files
    - Calls to the relay's chat (SSE) and upload endpoints
    - Combined flows such as send-and-persist and upload-and-record

Contains no business rules; Supabase and the relay own all behaviour.
"""

from chat_relay.client.api import RelayAPIClient, RelayError
from chat_relay.client.config import ClientConfig, get_client_config
from chat_relay.client.store import StoreError, SupabaseStore
from chat_relay.client.workflows import build_chat_messages, send_chat_message, upload_project_file

__all__ = [
    "ClientConfig",
    "RelayAPIClient",
    "RelayError",
    "StoreError",
    "SupabaseStore",
    "build_chat_messages",
    "get_client_config",
    "send_chat_message",
    "upload_project_file",
]

"""FastAPI endpoints for the chat relay.

HTTP and streaming routes with async request handling.
Supports Server-Sent Events for real-time chat streaming.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Stream a completion for a conversation
    - POST /api/upload: Relay a base64 file to the provider
    - GET /api/file/{id}: Provider metadata for an uploaded file
"""

from chat_relay.api.app import app, create_app

__all__ = ["app", "create_app"]

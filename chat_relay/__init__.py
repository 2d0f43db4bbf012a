"""Chat Relay - authenticated LLM chat relay for project-based conversations.

Combines FastAPI for HTTP streaming, Agno for model orchestration,
Supabase for identity and persistence, and Pydantic for data validation.

Components:
    - api: HTTP endpoints and server-sent event streaming
    - auth: Bearer token verification against Supabase Auth
    - llm: Completion streaming and file relay to OpenAI
    - client: Data access to Supabase and the relay endpoints
    - models: Request/response schemas and stored records
"""

__version__ = "0.1.0"

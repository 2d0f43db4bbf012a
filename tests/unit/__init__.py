"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - llm/: Configuration, streaming relay, file relay, model probe
    - auth/: Bearer parsing and token verification
    - client/: Supabase store, relay client, workflows
    - models/: Request shaping helpers

Uses mocks for external services. Leverages pytest-check for multiple
assertions per test.
"""

"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests through ASGITransport
    - SSE framing, status codes and error bodies
    - The relay client talking to the in-process app
    - Live completion streaming (when OPENAI_API_KEY is configured)
"""

"""Test package for Chat Relay.

Unit tests cover isolated logic; integration tests drive the FastAPI app
over HTTP with the identity and provider services swapped for fakes.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end endpoint and client tests

Live provider tests run only when OPENAI_API_KEY is set.
Leverages pytest with pytest-check for soft assertions.
"""

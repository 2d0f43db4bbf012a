"""Integration tests for the file relay endpoints.

Validates field checks, base64 decoding, size limits and provider
failure mapping through the real app with a fake file service.
"""

import base64

import pytest_check as check
from httpx import AsyncClient

from chat_relay.llm.files import FileRelayError
from chat_relay.models.schemas import UploadResponse
from tests.conftest import FakeFileService

FILE_BYTES = b"hello notes"


def upload_body(**overrides: str) -> dict[str, str]:
    body = {
        "filename": "notes.txt",
        "content": base64.b64encode(FILE_BYTES).decode(),
        "projectId": "project-1",
    }
    body.update(overrides)
    return body


class TestFileUpload:
    """Integration tests for POST /api/upload."""

    async def test_upload_success(
        self,
        async_client: AsyncClient,
        auth_headers: dict[str, str],
        fake_file_service: FakeFileService,
    ) -> None:
        """Valid upload returns the provider file id and original filename."""
        response = await async_client.post("/api/upload", json=upload_body(), headers=auth_headers)

        check.equal(response.status_code, 200)
        check.equal(
            response.json(),
            {"success": True, "fileId": "file-abc123", "filename": "notes.txt"},
        )
        check.equal(fake_file_service.uploads, [("notes.txt", FILE_BYTES)])

    async def test_upload_response_schema(
        self, async_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        """Response parses as UploadResponse."""
        response = await async_client.post("/api/upload", json=upload_body(), headers=auth_headers)

        data = UploadResponse.model_validate(response.json())
        check.is_true(data.success)
        check.equal(data.file_id, "file-abc123")

    async def test_missing_fields_return_400(
        self, async_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        for field in ("filename", "content", "projectId"):
            body = upload_body()
            del body[field]

            response = await async_client.post("/api/upload", json=body, headers=auth_headers)

            check.equal(response.status_code, 400, field)
            check.equal(
                response.json(), {"error": "Filename, content, and projectId required"}, field
            )

    async def test_empty_content_returns_400(
        self, async_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await async_client.post(
            "/api/upload", json=upload_body(content=""), headers=auth_headers
        )

        assert response.status_code == 400

    async def test_invalid_base64_returns_400(
        self,
        async_client: AsyncClient,
        auth_headers: dict[str, str],
        fake_file_service: FakeFileService,
    ) -> None:
        response = await async_client.post(
            "/api/upload", json=upload_body(content="not base64!!"), headers=auth_headers
        )

        check.equal(response.status_code, 400)
        check.equal(response.json(), {"error": "Content must be base64 encoded"})
        check.equal(fake_file_service.uploads, [])

    async def test_oversized_file_returns_413(
        self,
        async_client: AsyncClient,
        auth_headers: dict[str, str],
        fake_file_service: FakeFileService,
    ) -> None:
        """Decoded payload over the limit is rejected before upload."""
        fake_file_service.max_upload_bytes = len(FILE_BYTES) - 1

        response = await async_client.post("/api/upload", json=upload_body(), headers=auth_headers)

        check.equal(response.status_code, 413)
        check.equal(response.json(), {"error": "File exceeds maximum upload size"})
        check.equal(fake_file_service.uploads, [])

    async def test_file_at_limit_is_accepted(
        self,
        async_client: AsyncClient,
        auth_headers: dict[str, str],
        fake_file_service: FakeFileService,
    ) -> None:
        fake_file_service.max_upload_bytes = len(FILE_BYTES)

        response = await async_client.post("/api/upload", json=upload_body(), headers=auth_headers)

        assert response.status_code == 200

    async def test_numeric_project_id_is_accepted(
        self, async_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        body = {**upload_body(), "projectId": 7}

        response = await async_client.post("/api/upload", json=body, headers=auth_headers)

        check.equal(response.status_code, 200)
        check.equal(response.json()["fileId"], "file-abc123")

    async def test_provider_failure_returns_500(
        self,
        async_client: AsyncClient,
        auth_headers: dict[str, str],
        fake_file_service: FakeFileService,
    ) -> None:
        fake_file_service.upload_error = FileRelayError("provider down")

        response = await async_client.post("/api/upload", json=upload_body(), headers=auth_headers)

        check.equal(response.status_code, 500)
        check.equal(response.json(), {"error": "Upload failed"})


class TestFileRetrieval:
    """Integration tests for GET /api/file/{id}."""

    async def test_returns_provider_metadata(
        self, async_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await async_client.get("/api/file/file-abc123", headers=auth_headers)

        check.equal(response.status_code, 200)
        check.equal(response.json()["id"], "file-abc123")
        check.equal(response.json()["filename"], "notes.txt")

    async def test_provider_failure_returns_500(
        self,
        async_client: AsyncClient,
        auth_headers: dict[str, str],
        fake_file_service: FakeFileService,
    ) -> None:
        fake_file_service.retrieve_error = FileRelayError("no such file")

        response = await async_client.get("/api/file/file-missing", headers=auth_headers)

        check.equal(response.status_code, 500)
        check.equal(response.json(), {"error": "Could not retrieve file"})


class TestUploadErrorHandling:
    """Tests for request-level errors in the upload endpoint."""

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/upload")
        assert response.status_code == 405

    async def test_non_object_body_returns_400(
        self, async_client: AsyncClient, auth_headers: dict[str, str]
    ) -> None:
        response = await async_client.post("/api/upload", json=["a"], headers=auth_headers)

        check.equal(response.status_code, 400)
        check.equal(response.json(), {"error": "Invalid request body"})

    async def test_health_is_public(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        check.equal(response.status_code, 200)
        check.equal(response.json(), {"status": "healthy", "service": "chat-relay"})

    async def test_unknown_route_uses_error_body(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/missing")

        check.equal(response.status_code, 404)
        check.equal(response.json(), {"error": "Not Found"})

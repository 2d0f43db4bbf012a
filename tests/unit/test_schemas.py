"""Unit tests for request models and their shaping helpers."""

import pytest_check as check

from chat_relay.models.schemas import ChatRequest, UploadRequest, UploadResponse


class TestChatRequest:
    def test_reads_project_id_alias(self) -> None:
        request = ChatRequest.model_validate({"messages": [], "projectId": "p1"})

        assert request.project_id == "p1"

    def test_numeric_project_id_is_coerced(self) -> None:
        request = ChatRequest.model_validate({"messages": [], "projectId": 42})

        assert request.project_id == "42"

    def test_first_system_message_wins(self) -> None:
        request = ChatRequest.model_validate(
            {
                "messages": [
                    {"role": "system", "content": "First."},
                    {"role": "user", "content": "Hi"},
                    {"role": "system", "content": "Second."},
                ]
            }
        )

        assert request.system_prompt("Default.") == "First."

    def test_empty_system_message_uses_default(self) -> None:
        request = ChatRequest.model_validate({"messages": [{"role": "system", "content": ""}]})

        assert request.system_prompt("Default.") == "Default."

    def test_last_user_message(self) -> None:
        request = ChatRequest.model_validate(
            {
                "messages": [
                    {"role": "user", "content": "one"},
                    {"role": "assistant", "content": "reply"},
                    {"role": "user", "content": "two"},
                    {"role": "assistant", "content": "reply"},
                ]
            }
        )

        assert request.last_user_message() == "two"

    def test_helpers_tolerate_missing_messages(self) -> None:
        request = ChatRequest.model_validate({})

        check.equal(request.system_prompt("Default."), "Default.")
        check.equal(request.last_user_message(), "")


class TestUploadModels:
    def test_upload_request_alias(self) -> None:
        request = UploadRequest.model_validate(
            {"filename": "a.txt", "content": "YQ==", "projectId": "p1"}
        )

        assert request.project_id == "p1"

    def test_upload_request_coerces_numeric_project_id(self) -> None:
        request = UploadRequest.model_validate(
            {"filename": "a.txt", "content": "YQ==", "projectId": 7}
        )

        assert request.project_id == "7"

    def test_upload_response_serializes_file_id_alias(self) -> None:
        response = UploadResponse(success=True, file_id="file-1", filename="a.txt")

        assert response.model_dump(by_alias=True) == {
            "success": True,
            "fileId": "file-1",
            "filename": "a.txt",
        }

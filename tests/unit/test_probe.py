"""Unit tests for the model probe."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from openai import APIConnectionError

from chat_relay.llm.probe import DEFAULT_CANDIDATES, ProbeCandidate, ProbeError, probe_models


def failure() -> APIConnectionError:
    return APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/responses"))


def test_first_answering_model_wins() -> None:
    client = MagicMock()
    client.responses.create.side_effect = [failure(), SimpleNamespace(output_text="ok")]

    result = probe_models(client=client)

    assert result.model == "gpt-4o"
    assert result.output_text == "ok"
    assert client.responses.create.call_count == 2


def test_candidates_tried_in_order_with_their_options() -> None:
    client = MagicMock()
    client.responses.create.side_effect = [failure(), failure(), SimpleNamespace(output_text="ok")]

    probe_models(client=client)

    calls = client.responses.create.call_args_list
    assert [c.kwargs["model"] for c in calls] == ["gpt-5-mini", "gpt-4o", "gpt-4o-mini"]
    assert calls[0].kwargs["reasoning"] == {"effort": "minimal"}
    assert calls[0].kwargs["text"] == {"verbosity": "low"}
    assert "reasoning" not in calls[2].kwargs


def test_all_failures_raise_probe_error() -> None:
    client = MagicMock()
    client.responses.create.side_effect = failure()

    with pytest.raises(ProbeError) as exc_info:
        probe_models(client=client)

    assert set(exc_info.value.failures) == {c.model for c in DEFAULT_CANDIDATES}


def test_custom_candidates() -> None:
    client = MagicMock()
    client.responses.create.return_value = SimpleNamespace(output_text="fine")

    result = probe_models(candidates=(ProbeCandidate("o4-mini"),), client=client)

    assert result.model == "o4-mini"
    client.responses.create.assert_called_once_with(
        model="o4-mini", input='Say "o4-mini is working!"'
    )

"""Model availability probe for the Responses API.

Tries a short prompt against each candidate model in order and reports
the first that answers. Used to check an API key and account before
pointing the relay at a model.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from openai import OpenAI, OpenAIError

from chat_relay.llm.config import LLMConfig, get_llm_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeCandidate:
    """A model and the Responses options to call it with."""

    model: str
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProbeResult:
    model: str
    output_text: str


class ProbeError(Exception):
    """Raised when no candidate model answered."""

    def __init__(self, failures: dict[str, str]) -> None:
        self.failures = failures
        detail = "; ".join(f"{model}: {reason}" for model, reason in failures.items())
        super().__init__(f"No model answered the probe ({detail})")


_REASONING_OPTIONS = {"reasoning": {"effort": "minimal"}, "text": {"verbosity": "low"}}

DEFAULT_CANDIDATES: tuple[ProbeCandidate, ...] = (
    ProbeCandidate("gpt-5-mini", _REASONING_OPTIONS),
    ProbeCandidate("gpt-4o", _REASONING_OPTIONS),
    ProbeCandidate("gpt-4o-mini"),
)


def probe_models(
    candidates: tuple[ProbeCandidate, ...] = DEFAULT_CANDIDATES,
    config: LLMConfig | None = None,
    client: OpenAI | None = None,
) -> ProbeResult:
    """Return the first candidate model that completes a short prompt.

    Args:
        candidates: Models to try, in order of preference.
        config: Provider configuration; loaded from environment if omitted.
        client: Optional preconfigured OpenAI client.

    Returns:
        ProbeResult naming the model and its reply.

    Raises:
        ProbeError: If every candidate failed.
    """
    if client is None:
        config = config or get_llm_config()
        client = OpenAI(api_key=config.api_key, base_url=config.base_url)

    failures: dict[str, str] = {}
    for candidate in candidates:
        logger.info(f"Probing {candidate.model} with Responses API...")
        try:
            response = client.responses.create(
                model=candidate.model,
                input=f'Say "{candidate.model} is working!"',
                **candidate.options,
            )
        except OpenAIError as e:
            logger.warning(f"{candidate.model} failed: {e}")
            failures[candidate.model] = str(e)
            continue

        logger.info(f"{candidate.model} answered")
        return ProbeResult(model=candidate.model, output_text=response.output_text)

    raise ProbeError(failures)

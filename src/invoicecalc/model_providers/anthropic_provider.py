"""Anthropic model provider for invoice field extraction.

Messages use Anthropic content blocks; any ``system`` messages are lifted
into the ``system`` parameter.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from anthropic import Anthropic
from pydantic import BaseModel

from invoicecalc.core.config import LLMConfig
from invoicecalc.core.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def _strip_code_fences(text: str) -> str:
    """Return the JSON body of a reply that may be wrapped in markdown fences."""
    text = text.strip()
    if "```" in text:
        body = text.split("```")[1]
        if body.startswith("json"):
            body = body[4:]
        text = body.strip()
    return text


class AnthropicModelProvider:
    """IModelProvider backed by the Anthropic Messages API."""

    def __init__(self, config: LLMConfig, client: Anthropic | None = None) -> None:
        self._config = config
        if client is None:
            if not config.api_key:
                raise ValueError("INVOICECALC_LLM_API_KEY not configured")
            client = Anthropic(api_key=config.api_key)
        self._client = client

    def structured_output(
        self, messages: list[dict[str, Any]], response_model: type[T], **kwargs: Any
    ) -> T:
        system_parts = [m["content"] for m in messages if m.get("role") == "system"]
        schema = json.dumps(response_model.model_json_schema())
        system_parts.append(
            f"Respond with ONLY a JSON object matching this JSON schema, no other text:\n{schema}"
        )
        conversation = [m for m in messages if m.get("role") != "system"]

        response = self._client.messages.create(
            model=kwargs.get("model", self._config.model),
            max_tokens=kwargs.get("max_tokens", self._config.max_tokens),
            temperature=kwargs.get("temperature", self._config.temperature),
            system="\n\n".join(system_parts),
            messages=conversation,
        )
        text = "".join(block.text for block in response.content if block.type == "text")
        logger.debug("Model response received", extra={"model": self._config.model, "chars": len(text)})
        return response_model.model_validate_json(_strip_code_fences(text))

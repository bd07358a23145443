"""Mock model provider for local development and testing.

Returns canned responses. No real LLM calls.
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class MockModelProvider:
    """IModelProvider implementation that returns deterministic mock responses."""

    def __init__(self) -> None:
        self._canned_responses: dict[type, Any] = {}
        self._error: Exception | None = None
        self.calls: list[list[dict[str, Any]]] = []

    def set_response(self, response: Any) -> None:
        """Register the instance returned for requests of ``type(response)``."""
        self._canned_responses[type(response)] = response

    def set_error(self, error: Exception | None) -> None:
        """Make every call raise ``error`` (None to clear)."""
        self._error = error

    def structured_output(
        self, messages: list[dict[str, Any]], response_model: type[T], **kwargs: Any
    ) -> T:
        """Return the canned instance for the response model, or a default instance."""
        self.calls.append(messages)
        if self._error is not None:
            raise self._error
        if response_model in self._canned_responses:
            return self._canned_responses[response_model]
        return response_model()  # type: ignore[call-arg]

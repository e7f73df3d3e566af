"""
Adapter: OpenAI-compatible chat completions.

Implements the LLMPort by POSTing to `{base_url}/chat/completions`.
Any provider speaking the OpenAI wire format works (OpenAI, OpenRouter,
a local gateway) by changing LLM_BASE_URL.
"""

import json
import logging
from typing import Any, Optional

import requests

from app.domain.advisor.entities import ChatMessage
from app.domain.advisor.errors import (
    LLMNotConfiguredError,
    LLMRequestError,
    LLMResponseParseError,
)
from app.domain.advisor.ports import LLMPort

logger = logging.getLogger(__name__)


class OpenAIChatAdapter(LLMPort):
    """Chat-completion client built on requests."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o",
        temperature: float = 0.7,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key
        self._url = f"{base_url.rstrip('/')}/chat/completions"
        self._model = model
        self._temperature = temperature
        self._timeout = timeout
        self._session = session or requests.Session()

    def _completion(self, payload: dict[str, Any]) -> str:
        if not self._api_key:
            raise LLMNotConfiguredError()

        try:
            response = self._session.post(
                self._url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                data=json.dumps(payload),
                timeout=self._timeout,
            )
            response.raise_for_status()
            result = response.json()
        except requests.RequestException as exc:
            logger.error("LLM request to %s failed: %s", self._url, exc)
            raise LLMRequestError(str(exc)) from exc
        except ValueError as exc:
            raise LLMResponseParseError("response body is not JSON") from exc

        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise LLMResponseParseError("no choices in response") from None
        if not content or not content.strip():
            raise LLMResponseParseError("No content in response")

        usage = result.get("usage") or {}
        logger.debug(
            "LLM %s used %s prompt / %s completion tokens",
            payload["model"],
            usage.get("prompt_tokens"),
            usage.get("completion_tokens"),
        )
        return content.strip()

    def complete(
        self,
        messages: list[ChatMessage],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        payload: dict[str, Any] = {
            "model": model or self._model,
            "messages": [m.as_payload() for m in messages],
            "temperature": self._temperature,
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        return self._completion(payload)

    def complete_json(self, messages: list[ChatMessage]) -> dict[str, Any]:
        content = self._completion(
            {
                "model": self._model,
                "messages": [m.as_payload() for m in messages],
                "response_format": {"type": "json_object"},
            }
        )
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            raise LLMResponseParseError(f"invalid JSON: {exc.msg}") from exc
        if not isinstance(parsed, dict):
            raise LLMResponseParseError("expected a JSON object")
        return parsed

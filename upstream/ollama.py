"""Ollama chat backend over its streaming HTTP API."""

import json
from typing import Any, AsyncIterator, Optional
import httpx
import structlog

from upstream.client import UpstreamError

logger = structlog.get_logger()


def extract_content(unit: Any) -> str:
    """Pull the text out of one streamed chat unit.

    Ollama emits units shaped like
    ``{"message": {"role": "assistant", "content": "..."}, "done": false}``.
    Anything that does not carry a string content degrades to "".
    """
    message = unit.get("message") if isinstance(unit, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        logger.debug("ollama_unit_without_content")
        return ""
    return content


class OllamaChatClient:
    """Async streaming client for a local or remote Ollama server."""

    def __init__(
        self,
        base_url: str,
        model: str,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self._transport = transport

    def _build_payload(self, message: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": message}],
            "stream": True,
        }
        if self.temperature is not None:
            payload["options"] = {"temperature": self.temperature}
        return payload

    async def stream_chat(self, message: str) -> AsyncIterator[str]:
        """Stream reply fragments for a single user message.

        A fresh HTTP session is opened per call and closed when the
        iteration ends, fails or is cancelled.
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                async with client.stream(
                    "POST", "/api/chat", json=self._build_payload(message)
                ) as response:
                    if response.is_error:
                        body = (await response.aread()).decode("utf-8", errors="replace")
                        raise UpstreamError(
                            f"Ollama returned {response.status_code}: {body}"
                        )

                    logger.info("ollama_stream_opened", model=self.model)

                    async for line in response.aiter_lines():
                        if not line.strip():
                            continue
                        try:
                            unit = json.loads(line)
                        except json.JSONDecodeError as e:
                            raise UpstreamError(f"Undecodable Ollama stream line: {line!r}") from e

                        if isinstance(unit, dict) and unit.get("error"):
                            raise UpstreamError(f"Ollama error: {unit['error']}")

                        yield extract_content(unit)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Ollama request failed: {e}") from e

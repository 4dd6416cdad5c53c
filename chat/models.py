"""Chat data models."""

import json
from typing import Literal
from pydantic import BaseModel
from sse_starlette.sse import ServerSentEvent

DONE_MARKER = "[DONE]"
SSE_SEPARATOR = "\n"


class ChatRequest(BaseModel):
    """Chat request from user."""
    message: str


class ChatEvent(BaseModel):
    """One outbound event of a chat response stream."""
    id: int
    event: Literal["message", "complete"]
    content: str

    @property
    def data(self) -> dict[str, str]:
        return {"content": self.content}

    def to_sse(self) -> ServerSentEvent:
        """Render as an SSE frame with a single JSON data line."""
        return ServerSentEvent(
            data=json.dumps(self.data, ensure_ascii=False),
            event=self.event,
            id=str(self.id),
            sep=SSE_SEPARATOR,
        )

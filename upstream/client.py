"""Contract shared by the upstream chat backends."""

from typing import AsyncIterator, Protocol


class UpstreamError(Exception):
    """Raised when the model backend fails while producing a reply."""


class ChatClient(Protocol):
    """Anything that turns one user message into a stream of text fragments."""

    def stream_chat(self, message: str) -> AsyncIterator[str]:
        """Stream the model's reply to a single-turn prompt.

        Fragments may be empty strings; callers filter them.
        """
        ...

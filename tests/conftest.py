"""Pytest configuration and fixtures."""

import asyncio
import pytest
from httpx import AsyncClient, ASGITransport
from sse_starlette import sse

from main import app
from upstream import get_chat_client


class FakeChatClient:
    """Scripted stand-in for an upstream chat backend."""

    def __init__(self, fragments=None, error=None, delay=0.0, endless=False):
        self.fragments = list(fragments or [])
        self.error = error
        self.delay = delay
        self.endless = endless
        self.messages: list[str] = []
        self.closed = False

    async def stream_chat(self, message: str):
        self.messages.append(message)
        try:
            while True:
                for fragment in self.fragments:
                    if self.delay:
                        await asyncio.sleep(self.delay)
                    yield fragment
                if not self.endless:
                    break
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True


@pytest.fixture(autouse=True)
def reset_sse_app_status():
    """Older sse-starlette releases bind a process-wide exit event to the first loop."""
    app_status = getattr(sse, "AppStatus", None)
    if app_status is not None:
        app_status.should_exit_event = None
    yield


@pytest.fixture
def fake_chat_client():
    """Install a FakeChatClient as the app's upstream."""
    client = FakeChatClient()
    app.dependency_overrides[get_chat_client] = lambda: client
    yield client
    app.dependency_overrides.pop(get_chat_client, None)


@pytest.fixture
async def async_client():
    """Async HTTP client for testing API endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

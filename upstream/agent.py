"""Chat backend driven by a Pydantic AI agent (OpenRouter by default)."""

from typing import AsyncIterator, Union
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError
from pydantic_ai.models import Model
import structlog

from upstream.client import UpstreamError

logger = structlog.get_logger()


class AgentChatClient:
    """Streams plain-text replies from a tool-less Pydantic AI agent."""

    def __init__(self, model: Union[Model, str]):
        self.agent = Agent(model)

    async def stream_chat(self, message: str) -> AsyncIterator[str]:
        """Stream text deltas for a single user message."""
        try:
            async with self.agent.run_stream(message) as result:
                async for delta in result.stream_text(delta=True, debounce_by=None):
                    yield delta or ""
        except AgentRunError as e:
            logger.error("agent_stream_failed", error=str(e))
            raise UpstreamError(f"Agent run failed: {e}") from e

"""Tests for the Pydantic AI backed chat client."""

import pytest
from pydantic_ai.exceptions import ModelHTTPError
from pydantic_ai.messages import ModelRequest, UserPromptPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from upstream import UpstreamError
from upstream.agent import AgentChatClient


async def collect(client, message="hello"):
    return [fragment async for fragment in client.stream_chat(message)]


@pytest.mark.asyncio
async def test_agent_client_streams_text_deltas():
    async def stream_reply(messages, info: AgentInfo):
        yield "Hel"
        yield "lo"

    fragments = await collect(AgentChatClient(FunctionModel(stream_function=stream_reply)))

    assert "".join(fragments) == "Hello"
    assert all(isinstance(fragment, str) for fragment in fragments)


@pytest.mark.asyncio
async def test_agent_client_sends_single_user_prompt():
    prompts = []

    async def stream_reply(messages, info: AgentInfo):
        for message in messages:
            if isinstance(message, ModelRequest):
                prompts.extend(
                    part.content for part in message.parts if isinstance(part, UserPromptPart)
                )
        yield "ok"

    await collect(AgentChatClient(FunctionModel(stream_function=stream_reply)), "What is SSE?")

    assert prompts == ["What is SSE?"]


@pytest.mark.asyncio
async def test_agent_client_wraps_run_errors():
    async def stream_reply(messages, info: AgentInfo):
        yield "Hi"
        raise ModelHTTPError(status_code=502, model_name="function", body="bad gateway")

    with pytest.raises(UpstreamError, match="502"):
        await collect(AgentChatClient(FunctionModel(stream_function=stream_reply)))

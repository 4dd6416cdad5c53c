"""Chat API routes."""

import asyncio
from contextlib import aclosing
from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse
import structlog

from chat.models import ChatRequest, SSE_SEPARATOR
from chat.relay import relay_events
from config import get_settings
from upstream import ChatClient, get_chat_client

logger = structlog.get_logger()

router = APIRouter()


@router.get("/chat")
async def chat(
    request: ChatRequest = Depends(),
    client: ChatClient = Depends(get_chat_client)
):
    """Stream the model's reply to a message as server-sent events.

    Each non-empty fragment is sent as a `message` event carrying
    `{"content": ...}`; the stream ends with a `complete` event whose
    content is `[DONE]`.
    """
    async def event_stream():
        sent = 0
        logger.info("chat_stream_started", message_length=len(request.message))
        try:
            async with aclosing(client.stream_chat(request.message)) as fragments:
                async for event in relay_events(fragments):
                    sent += 1
                    yield event.to_sse()
        except asyncio.CancelledError:
            logger.info("chat_stream_cancelled", events=sent)
            raise
        except Exception as e:
            logger.error("chat_stream_failed", events=sent, error=str(e))
            raise
        logger.info("chat_stream_completed", events=sent)

    return EventSourceResponse(
        event_stream(),
        ping=get_settings().sse_ping_interval,
        sep=SSE_SEPARATOR,
    )

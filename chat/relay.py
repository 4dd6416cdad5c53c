"""Turns a stream of model fragments into numbered chat events."""

from typing import AsyncIterator

from chat.models import ChatEvent, DONE_MARKER


async def relay_events(fragments: AsyncIterator[str]) -> AsyncIterator[ChatEvent]:
    """Relay non-empty fragments as message events, then one complete event.

    Ids start at 1 for every call and stay contiguous up to the terminal
    event. If ``fragments`` raises, the error propagates and no complete
    event is produced.
    """
    event_id = 0

    async for fragment in fragments:
        if not fragment:
            continue
        event_id += 1
        yield ChatEvent(id=event_id, event="message", content=fragment)

    event_id += 1
    yield ChatEvent(id=event_id, event="complete", content=DONE_MARKER)

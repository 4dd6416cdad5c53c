"""Chat streaming feature."""

from .models import ChatRequest, ChatEvent
from .relay import relay_events
from .routes import router

__all__ = ["ChatRequest", "ChatEvent", "relay_events", "router"]

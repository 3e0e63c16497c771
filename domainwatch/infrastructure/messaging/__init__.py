"""Message handler registration."""
from domainwatch.infrastructure.messaging.handler_registry import MessageHandlerRegistry

__all__ = ["MessageHandlerRegistry"]

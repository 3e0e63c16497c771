"""Explicit table mapping message kinds to handler callables.

The queue consumer looks the kind up here instead of relying on
handler discovery.
"""
import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

MessageHandlerFn = Callable[[Dict[str, Any]], Any]


class MessageHandlerRegistry:
    """Registry for message handlers."""

    def __init__(self):
        self._handlers: Dict[str, MessageHandlerFn] = {}

    def register(self, kind: str, handler: MessageHandlerFn):
        """
        Register a handler for a message kind, replacing any previous one.

        Args:
            kind: Message kind (e.g. 'process_domain_trigger')
            handler: Callable receiving the JSON payload
        """
        self._handlers[kind] = handler
        logger.debug(f"Registered message handler for {kind}")

    def kinds(self) -> List[str]:
        return sorted(self._handlers)

    def handle(self, kind: str, payload: Dict[str, Any]) -> Any:
        """
        Invoke the handler registered for ``kind``.

        Raises:
            KeyError: If no handler is registered for ``kind``
        """
        try:
            handler = self._handlers[kind]
        except KeyError:
            raise KeyError(f"No handler registered for message kind {kind!r}") from None
        return handler(payload)

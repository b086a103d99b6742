"""Dispatch of decoded webhook events to handlers."""

import logging
from collections import defaultdict
from collections.abc import Callable

from src.webhooks.delivery import Delivery
from src.webhooks.events import WebhookEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[WebhookEvent, Delivery], None]


class EventProcessor:
    """Routes decoded webhook events to the handlers registered for their model.

    Handlers registered for a base class also receive events of its
    subclasses, so a handler registered for WebhookEvent sees every event.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[type[WebhookEvent], list[EventHandler]] = defaultdict(list)

    def register(self, model: type[WebhookEvent], handler: EventHandler) -> None:
        """Register handler for events of model and its subclasses."""
        self._handlers[model].append(handler)

    def on(self, model: type[WebhookEvent]) -> Callable[[EventHandler], EventHandler]:
        """Decorator form of register."""

        def decorator(handler: EventHandler) -> EventHandler:
            self.register(model, handler)
            return handler

        return decorator

    def handlers_for(self, event: WebhookEvent) -> list[EventHandler]:
        handlers: list[EventHandler] = []
        for cls in type(event).__mro__:
            handlers.extend(self._handlers.get(cls, ()))
        return handlers

    def process(self, delivery: Delivery, event: WebhookEvent) -> bool:
        """Run every handler registered for the event.

        Args:
            delivery: The delivery the event was decoded from
            event: The decoded event

        Returns:
            True if all handlers succeeded, False otherwise
        """
        handlers = self.handlers_for(event)
        if not handlers:
            logger.debug("No handlers for event type: %s", delivery.event_type)
            return True

        success = True
        for handler in handlers:
            try:
                handler(event, delivery)
            except Exception as e:
                logger.error(
                    "Handler %s failed for delivery %s: %s",
                    getattr(handler, "__name__", repr(handler)),
                    delivery.delivery_id,
                    str(e),
                )
                success = False
        return success


def log_event(event: WebhookEvent, delivery: Delivery) -> None:
    """Log a one-line summary of a processed event."""
    action = getattr(event, "action", None)
    logger.info(
        "Processed %s%s: delivery=%s repository=%s sender=%s",
        event.event_type,
        f".{action}" if action else "",
        delivery.delivery_id or "unknown",
        event.repository.full_name if event.repository else None,
        event.sender.login if event.sender else None,
    )


def create_event_processor() -> EventProcessor:
    """Create an event processor that logs every event it receives."""
    processor = EventProcessor()
    processor.register(WebhookEvent, log_event)
    return processor

"""Registry mapping X-GitHub-Event values to event models.

The registry decodes a verified JSON payload into the event model registered
for its event type. Callers then discriminate on the model class::

    event = default_registry().decode(delivery.event_type, payload)
    match event:
        case PushEvent():
            ...
        case PullRequestEvent(action="opened"):
            ...
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from pydantic import ValidationError

from src.webhooks.errors import MalformedPayloadError, UnknownEventTypeError
from src.webhooks.events import EVENT_MODELS, WebhookEvent

logger = logging.getLogger(__name__)


class EventRegistry:
    """Immutable, bidirectional mapping of event type names to event models.

    The mapping is validated once on construction: each event type names
    exactly one model and each model is registered under exactly one event
    type. Instances are never mutated afterwards and can be shared freely
    between threads.
    """

    def __init__(self, models: Mapping[str, type[WebhookEvent]]):
        """Build a registry from an explicit mapping.

        Args:
            models: Event type name to event model class

        Raises:
            ValueError: If an event type is empty or a model is registered twice
        """
        by_model: dict[type[WebhookEvent], str] = {}
        for event_type, model in models.items():
            if not event_type:
                raise ValueError(f"{model.__name__} has an empty event type")
            if model in by_model:
                raise ValueError(
                    f"{model.__name__} registered as both {by_model[model]!r} and {event_type!r}"
                )
            by_model[model] = event_type

        self._by_type: Mapping[str, type[WebhookEvent]] = MappingProxyType(dict(models))
        self._by_model: Mapping[type[WebhookEvent], str] = MappingProxyType(by_model)

    @classmethod
    def from_models(cls, models: Iterable[type[WebhookEvent]]) -> "EventRegistry":
        """Build a registry keyed by each model's ``event_type`` attribute.

        Raises:
            ValueError: If two models declare the same event type
        """
        mapping: dict[str, type[WebhookEvent]] = {}
        for model in models:
            existing = mapping.get(model.event_type)
            if existing is not None and existing is not model:
                raise ValueError(
                    f"event type {model.event_type!r} declared by both "
                    f"{existing.__name__} and {model.__name__}"
                )
            mapping[model.event_type] = model
        return cls(mapping)

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._by_type

    def __len__(self) -> int:
        return len(self._by_type)

    def __iter__(self) -> Iterator[str]:
        return iter(self.event_types())

    def event_types(self) -> list[str]:
        """Return the registered event type names, sorted."""
        return sorted(self._by_type)

    def model_for(self, event_type: str) -> type[WebhookEvent]:
        """Return the model registered for event_type.

        Raises:
            UnknownEventTypeError: If event_type is not registered
        """
        try:
            return self._by_type[event_type]
        except KeyError:
            raise UnknownEventTypeError(event_type) from None

    def type_name(self, event_type: str) -> str:
        """Return the class name of the model registered for event_type."""
        return self.model_for(event_type).__name__

    def event_type_of(self, event: WebhookEvent | type[WebhookEvent]) -> str:
        """Return the event type name an event model, or an instance of one, is registered under.

        Raises:
            UnknownEventTypeError: If the model is not registered
        """
        model = event if isinstance(event, type) else type(event)
        try:
            return self._by_model[model]
        except KeyError:
            raise UnknownEventTypeError(model.__name__) from None

    def new_event(self, event_type: str) -> WebhookEvent | None:
        """Return a fresh, empty event for event_type, or None if it is unknown."""
        model = self._by_type.get(event_type)
        if model is None:
            return None
        return model()

    def decode(self, event_type: str, payload: bytes | str) -> WebhookEvent:
        """Decode a JSON payload into the event model registered for event_type.

        Args:
            event_type: The X-GitHub-Event header value
            payload: The verified JSON payload

        Returns:
            A new instance of the registered event model

        Raises:
            UnknownEventTypeError: If event_type is not registered
            MalformedPayloadError: If payload is not valid JSON for the model
        """
        model = self.model_for(event_type)
        try:
            return model.model_validate_json(payload)
        except ValidationError as e:
            logger.warning(
                "Failed to decode %s payload: %d validation error(s)", event_type, e.error_count()
            )
            raise MalformedPayloadError(f"invalid {event_type} payload: {e}") from e


@lru_cache(maxsize=1)
def default_registry() -> EventRegistry:
    """Return the registry of every event model shipped with this package."""
    return EventRegistry.from_models(EVENT_MODELS)


def parse_webhook(event_type: str, payload: bytes | str) -> WebhookEvent:
    """Decode payload with the default registry."""
    return default_registry().decode(event_type, payload)


def message_types() -> list[str]:
    """Return every event type name known to the default registry, sorted."""
    return default_registry().event_types()


def event_for_type(event_type: str) -> WebhookEvent | None:
    """Return an empty event for event_type from the default registry, or None."""
    return default_registry().new_event(event_type)

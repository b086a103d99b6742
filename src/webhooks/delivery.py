"""Webhook delivery headers and the top-level validation entry points.

Typical use from an HTTP handler::

    delivery = Delivery.from_request(request.headers, body)
    event = delivery.parse(settings.github_webhook_secret)

Validation and decoding are separate steps, so a handler can verify a
delivery without decoding it (``Delivery.verify``) or decode a payload it
already verified (``EventRegistry.decode``). ``Delivery.parse`` runs both in
order and never decodes bytes that failed verification.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import BinaryIO

from pydantic import BaseModel, Field

from src.webhooks.config import DEFAULT_MAX_BODY_BYTES
from src.webhooks.events import WebhookEvent
from src.webhooks.payload import parse_media_type, validate_payload_from_body
from src.webhooks.registry import EventRegistry, default_registry

logger = logging.getLogger(__name__)

# HMAC-SHA1 hexdigest of the body
SHA1_SIGNATURE_HEADER = "X-Hub-Signature"
# HMAC-SHA256 hexdigest of the body
SHA256_SIGNATURE_HEADER = "X-Hub-Signature-256"
EVENT_TYPE_HEADER = "X-GitHub-Event"
DELIVERY_ID_HEADER = "X-GitHub-Delivery"
HOOK_ID_HEADER = "X-GitHub-Hook-ID"
CONTENT_TYPE_HEADER = "Content-Type"

# Signature headers in order of preference
SIGNATURE_HEADERS: tuple[str, ...] = (SHA256_SIGNATURE_HEADER, SHA1_SIGNATURE_HEADER)


def get_header(headers: Mapping[str, str], name: str) -> str:
    """Look up a header case-insensitively, returning "" when it is absent."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return ""


def webhook_type(headers: Mapping[str, str]) -> str:
    """Return the event type of a delivery (X-GitHub-Event)."""
    return get_header(headers, EVENT_TYPE_HEADER)


def delivery_id(headers: Mapping[str, str]) -> str:
    """Return the unique delivery ID (X-GitHub-Delivery)."""
    return get_header(headers, DELIVERY_ID_HEADER)


def select_signature(headers: Mapping[str, str]) -> str:
    """Return the first non-empty signature header in SIGNATURE_HEADERS order."""
    for name in SIGNATURE_HEADERS:
        value = get_header(headers, name)
        if value:
            return value
    return ""


def _validate(
    headers: Mapping[str, str],
    body: bytes | BinaryIO,
    secret: str | bytes | None,
    *,
    allow_unsigned: bool,
    max_body_size: int,
) -> bytes:
    media_type, _ = parse_media_type(get_header(headers, CONTENT_TYPE_HEADER))
    return validate_payload_from_body(
        media_type,
        body,
        select_signature(headers),
        secret,
        allow_unsigned=allow_unsigned,
        max_body_size=max_body_size,
    )


def validate_payload(
    headers: Mapping[str, str],
    body: bytes | BinaryIO,
    secret: str | bytes | None,
    *,
    max_body_size: int = DEFAULT_MAX_BODY_BYTES,
) -> bytes:
    """Validate a webhook request and return its JSON payload.

    The X-Hub-Signature-256 header is preferred over X-Hub-Signature. A
    delivery must be signed: with no secret and no signature this raises
    MissingSignatureError. See validate_payload_insecure for local development.

    Args:
        headers: Request headers
        body: Raw request body bytes or a binary stream
        secret: The webhook secret configured in GitHub
        max_body_size: Maximum number of body bytes to read

    Returns:
        The verified JSON payload bytes
    """
    return _validate(headers, body, secret, allow_unsigned=False, max_body_size=max_body_size)


def validate_payload_insecure(
    headers: Mapping[str, str],
    body: bytes | BinaryIO,
    secret: str | bytes | None = None,
    *,
    max_body_size: int = DEFAULT_MAX_BODY_BYTES,
) -> bytes:
    """Like validate_payload, but accept deliveries with no secret and no signature.

    Such deliveries are not authenticated at all. Only use this for local
    development against webhooks configured without a secret. A signature
    that is present is still verified.
    """
    return _validate(headers, body, secret, allow_unsigned=True, max_body_size=max_body_size)


class Delivery(BaseModel):
    """A single inbound webhook call."""

    event_type: str = ""
    delivery_id: str = ""
    hook_id: str = ""
    content_type: str = ""
    signature: str = ""
    body: bytes = b""
    received_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def from_request(cls, headers: Mapping[str, str], body: bytes) -> "Delivery":
        """Build a delivery from request headers and the raw body."""
        return cls(
            event_type=webhook_type(headers),
            delivery_id=delivery_id(headers),
            hook_id=get_header(headers, HOOK_ID_HEADER),
            content_type=get_header(headers, CONTENT_TYPE_HEADER),
            signature=select_signature(headers),
            body=body,
        )

    def verify(
        self,
        secret: str | bytes | None,
        *,
        allow_unsigned: bool = False,
        max_body_size: int = DEFAULT_MAX_BODY_BYTES,
    ) -> bytes:
        """Verify the delivery and return its JSON payload.

        Raises:
            WebhookError: If the content type, body or signature is rejected
        """
        media_type, _ = parse_media_type(self.content_type)
        return validate_payload_from_body(
            media_type,
            self.body,
            self.signature,
            secret,
            allow_unsigned=allow_unsigned,
            max_body_size=max_body_size,
        )

    def parse(
        self,
        secret: str | bytes | None,
        registry: EventRegistry | None = None,
        *,
        allow_unsigned: bool = False,
        max_body_size: int = DEFAULT_MAX_BODY_BYTES,
    ) -> WebhookEvent:
        """Verify the delivery, then decode it into its event model.

        Raises:
            WebhookError: If verification fails, the event type is unknown or
                the payload does not decode
        """
        payload = self.verify(secret, allow_unsigned=allow_unsigned, max_body_size=max_body_size)
        if registry is None:
            registry = default_registry()
        event = registry.decode(self.event_type, payload)
        logger.debug("Decoded %s delivery %s", self.event_type, self.delivery_id)
        return event

"""Exceptions raised while verifying and decoding GitHub webhook deliveries."""


class WebhookError(Exception):
    """Base class for webhook verification and decoding failures."""


class MissingSignatureError(WebhookError):
    """Raised when a delivery carries no signature but one is required."""


class MalformedSignatureHeaderError(WebhookError):
    """Raised when a signature header cannot be parsed."""

    def __init__(self, message: str, header: str = ""):
        super().__init__(message)
        self.header = header


class UnsupportedHashAlgorithmError(MalformedSignatureHeaderError):
    """Raised when the signature prefix names an unknown hash algorithm."""

    def __init__(self, prefix: str, header: str = ""):
        super().__init__(f"unknown hash type prefix: {prefix!r}", header)
        self.prefix = prefix


class InvalidSignatureError(WebhookError):
    """Raised when the payload MAC does not match the signature."""

    def __init__(self, algorithm: str):
        super().__init__(f"payload signature check failed ({algorithm})")
        self.algorithm = algorithm


class UnsupportedContentTypeError(WebhookError):
    """Raised for content types other than JSON and form-encoded."""

    def __init__(self, content_type: str, message: str | None = None):
        super().__init__(
            message or f"webhook request has unsupported Content-Type {content_type!r}"
        )
        self.content_type = content_type


class MalformedContentTypeError(UnsupportedContentTypeError):
    """Raised when the Content-Type header does not follow media type syntax."""

    def __init__(self, content_type: str, reason: str):
        super().__init__(content_type, f"malformed Content-Type {content_type!r}: {reason}")


class MissingPayloadFieldError(WebhookError):
    """Raised when a form-encoded delivery has no 'payload' field."""


class MalformedPayloadError(WebhookError):
    """Raised when the body is unreadable or not valid for the event type."""


class PayloadReadError(MalformedPayloadError):
    """Raised when the request body could not be read."""


class PayloadTooLargeError(MalformedPayloadError):
    """Raised when the request body exceeds the configured size limit."""

    def __init__(self, limit: int):
        super().__init__(f"webhook body exceeds {limit} bytes")
        self.limit = limit


class UnknownEventTypeError(WebhookError):
    """Raised for event types that are not registered.

    New event kinds appear upstream before clients learn about them, so callers
    should usually acknowledge and ignore these deliveries.
    """

    def __init__(self, event_type: str):
        super().__init__(f"unknown X-GitHub-Event in message: {event_type!r}")
        self.event_type = event_type

"""Configuration settings for the webhook receiver service."""

from typing import ClassVar

from src.webhooks.config import WebhookSettings


class ReceiverSettings(WebhookSettings):
    """Settings for the webhook receiver service.

    Unknown environment variables are ignored to prevent failures during import
    when placeholder values are present. A non-integer 'port' value will be
    discarded so that the default is used.
    """

    _numeric_fields: ClassVar[tuple[str, ...]] = ("max_body_bytes", "port")

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8080

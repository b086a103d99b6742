"""Configuration settings for webhook verification.

These settings classes are resilient to placeholder environment variables that may
appear in certain development or CI environments. Unknown environment variables
are ignored, and integer or boolean values that do not parse fall back to the
default.
"""

from typing import ClassVar

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# GitHub caps webhook payloads at 25 MB
DEFAULT_MAX_BODY_BYTES = 25 * 1024 * 1024

# Strings pydantic accepts for a bool field
_BOOL_STRINGS = frozenset({"0", "off", "f", "false", "n", "no", "1", "on", "t", "true", "y", "yes"})


class WebhookSettings(BaseSettings):
    """Settings for verifying inbound webhook deliveries.

    Leaving ``github_webhook_secret`` empty means deliveries can only be accepted
    when ``allow_unsigned_deliveries`` is switched on. That mode performs no
    authentication at all and is meant for local development only.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    # GitHub webhook secret for signature validation
    github_webhook_secret: str = ""

    # Accept deliveries without secret and signature (insecure, development only)
    allow_unsigned_deliveries: bool = False

    # Upper bound on the request body read into memory
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    _numeric_fields: ClassVar[tuple[str, ...]] = ("max_body_bytes",)
    _bool_fields: ClassVar[tuple[str, ...]] = ("allow_unsigned_deliveries",)

    @model_validator(mode="before")
    @classmethod
    def _sanitize(cls, values: dict[str, object]) -> dict[str, object]:
        # Drop placeholder strings so the defaults apply
        if isinstance(values, dict):
            for name in cls._numeric_fields:
                raw = values.get(name)
                if isinstance(raw, str):
                    try:
                        int(raw.strip())
                    except (ValueError, TypeError):
                        values.pop(name, None)
            for name in cls._bool_fields:
                raw = values.get(name)
                if isinstance(raw, str):
                    if raw.strip().lower() in _BOOL_STRINGS:
                        values[name] = raw.strip()
                    else:
                        values.pop(name, None)
        return values

"""Extraction of the signed JSON payload from a webhook request body.

GitHub delivers webhooks either as a raw JSON document (``application/json``)
or as a form with the JSON document in its ``payload`` field
(``application/x-www-form-urlencoded``). Either way the signature covers the
raw body exactly as sent, so verification always runs over the bytes read from
the request and never over the extracted document.
"""

import logging
import re
from typing import BinaryIO
from urllib.parse import parse_qs

from src.webhooks.config import DEFAULT_MAX_BODY_BYTES
from src.webhooks.errors import (
    MalformedContentTypeError,
    MalformedPayloadError,
    MissingPayloadFieldError,
    MissingSignatureError,
    PayloadReadError,
    PayloadTooLargeError,
    UnsupportedContentTypeError,
)
from src.webhooks.signature import validate_signature

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Name of the form field holding the JSON document in form-encoded deliveries
PAYLOAD_FORM_FIELD = "payload"

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MEDIA_TYPE_RE = re.compile(rf"\s*({_TOKEN})/({_TOKEN})\s*")
_PARAMETER_RE = re.compile(rf';\s*({_TOKEN})=({_TOKEN}|"(?:[^"\\]|\\.)*")\s*')
_QUOTED_PAIR_RE = re.compile(r"\\(.)")
_BAD_ESCAPE_RE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


def parse_media_type(header: str) -> tuple[str, dict[str, str]]:
    """Split a Content-Type header into its media type and parameters.

    The media type and parameter names are lower-cased. A trailing semicolon
    is tolerated; anything else outside the media type grammar is rejected.

    Raises:
        MalformedContentTypeError: If the header is empty or malformed
    """
    match = _MEDIA_TYPE_RE.match(header or "")
    if match is None:
        raise MalformedContentTypeError(header, "expected type/subtype")

    media_type = f"{match.group(1)}/{match.group(2)}".lower()
    params: dict[str, str] = {}
    pos = match.end()
    while pos < len(header):
        if header[pos:].strip() == ";":
            break
        param = _PARAMETER_RE.match(header, pos)
        if param is None:
            raise MalformedContentTypeError(header, "invalid media parameter")
        name, value = param.group(1).lower(), param.group(2)
        if value.startswith('"'):
            value = _QUOTED_PAIR_RE.sub(r"\1", value[1:-1])
        if name in params:
            raise MalformedContentTypeError(header, f"duplicate parameter {name!r}")
        params[name] = value
        pos = param.end()

    return media_type, params


def read_body(body: bytes | BinaryIO, max_body_size: int = DEFAULT_MAX_BODY_BYTES) -> bytes:
    """Read a request body, refusing anything larger than max_body_size.

    Raises:
        PayloadReadError: If the body stream fails
        PayloadTooLargeError: If the body exceeds max_body_size
    """
    if isinstance(body, bytes | bytearray | memoryview):
        data = bytes(body)
        if len(data) > max_body_size:
            raise PayloadTooLargeError(max_body_size)
        return data

    # Raw streams may return fewer bytes than requested, so read until EOF
    chunks: list[bytes] = []
    size = 0
    while size <= max_body_size:
        try:
            chunk = body.read(max_body_size + 1 - size)
        except OSError as e:
            raise PayloadReadError(f"error reading webhook body: {e}") from e
        if chunk is None:
            raise PayloadReadError("webhook body stream has no data available")
        if not chunk:
            break
        chunks.append(chunk)
        size += len(chunk)

    if size > max_body_size:
        raise PayloadTooLargeError(max_body_size)
    return b"".join(chunks)


def extract_payload(media_type: str, body: bytes) -> bytes:
    """Return the JSON document carried by a raw body of the given media type.

    Raises:
        UnsupportedContentTypeError: For media types other than JSON and forms
        MalformedPayloadError: If a form body cannot be decoded
        MissingPayloadFieldError: If a form body has no payload field
    """
    if media_type == JSON_CONTENT_TYPE:
        return body
    if media_type != FORM_CONTENT_TYPE:
        raise UnsupportedContentTypeError(media_type)

    if _BAD_ESCAPE_RE.search(body):
        raise MalformedPayloadError("invalid URL escape in form-encoded body")
    try:
        form = parse_qs(body.decode("utf-8"), keep_blank_values=True, errors="strict")
    except ValueError as e:
        raise MalformedPayloadError(f"error decoding form-encoded body: {e}") from e

    values = form.get(PAYLOAD_FORM_FIELD)
    if not values:
        raise MissingPayloadFieldError(
            f"form-encoded body has no {PAYLOAD_FORM_FIELD!r} field"
        )
    return values[0].encode("utf-8")


def validate_payload_from_body(
    media_type: str,
    body: bytes | BinaryIO,
    signature: str | None = None,
    secret: str | bytes | None = None,
    *,
    allow_unsigned: bool = False,
    max_body_size: int = DEFAULT_MAX_BODY_BYTES,
) -> bytes:
    """Validate a webhook body and return its JSON payload.

    The signature is checked whenever a secret is configured or a signature
    was sent. A delivery with neither is rejected unless allow_unsigned is
    set. Unsigned deliveries are not authenticated in any way and should only
    be accepted during local development.

    Args:
        media_type: Media type of the request, without parameters
        body: Raw request body bytes or a binary stream
        signature: Signature header value, if any
        secret: The webhook secret configured in GitHub, if any
        allow_unsigned: Accept deliveries without secret and signature
        max_body_size: Maximum number of body bytes to read

    Returns:
        The JSON payload bytes

    Raises:
        UnsupportedContentTypeError: For unsupported media types
        MalformedPayloadError: If the body cannot be read or decoded
        MissingPayloadFieldError: If a form body has no payload field
        MissingSignatureError: If verification is required but no signature was sent
        MalformedSignatureHeaderError: If the signature cannot be parsed
        InvalidSignatureError: If the signature does not match
    """
    if media_type not in (JSON_CONTENT_TYPE, FORM_CONTENT_TYPE):
        raise UnsupportedContentTypeError(media_type)

    raw = read_body(body, max_body_size)
    payload = extract_payload(media_type, raw)

    if secret or signature:
        validate_signature(signature or "", raw, secret)
    elif allow_unsigned:
        logger.warning("No webhook secret configured, skipping signature validation")
    else:
        raise MissingSignatureError("unsigned delivery and no webhook secret configured")

    return payload

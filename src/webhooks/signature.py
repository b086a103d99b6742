"""GitHub webhook signature parsing and HMAC verification."""

import hashlib
import hmac
import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.webhooks.errors import (
    InvalidSignatureError,
    MalformedSignatureHeaderError,
    MissingSignatureError,
    UnsupportedHashAlgorithmError,
)

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class HashAlgorithm(str, Enum):
    """Hash algorithms accepted in a signature header prefix."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def constructor(self) -> Callable[..., Any]:
        """The hashlib constructor for this algorithm."""
        return getattr(hashlib, self.value)

    @property
    def digest_size(self) -> int:
        """Length in bytes of a digest produced by this algorithm."""
        return self.constructor().digest_size


class Signature(BaseModel):
    """A parsed signature header: the hash algorithm and the expected digest."""

    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm
    digest: bytes

    def __str__(self) -> str:
        return f"{self.algorithm.value}={self.digest.hex()}"


def _secret_bytes(secret: str | bytes | None) -> bytes:
    if secret is None:
        return b""
    if isinstance(secret, str):
        return secret.encode("utf-8")
    return bytes(secret)


def parse_signature(header: str) -> Signature:
    """Parse a signature header value of the form ``<algorithm>=<hexdigest>``.

    Args:
        header: The X-Hub-Signature or X-Hub-Signature-256 header value

    Returns:
        The parsed Signature

    Raises:
        MissingSignatureError: If the header is empty
        UnsupportedHashAlgorithmError: If the prefix is not sha1, sha256 or sha512
        MalformedSignatureHeaderError: If the header has no prefix, the digest is
            not hexadecimal, or its length does not match the algorithm
    """
    if not header:
        raise MissingSignatureError("missing signature")

    prefix, sep, hexdigest = header.partition("=")
    if not sep:
        raise MalformedSignatureHeaderError(f"error parsing signature {header!r}", header)

    try:
        algorithm = HashAlgorithm(prefix)
    except ValueError:
        raise UnsupportedHashAlgorithmError(prefix, header) from None

    if len(hexdigest) % 2 or not _HEX_RE.fullmatch(hexdigest):
        raise MalformedSignatureHeaderError(f"error decoding signature {header!r}", header)
    digest = bytes.fromhex(hexdigest)

    if len(digest) != algorithm.digest_size:
        raise MalformedSignatureHeaderError(
            f"signature {header!r} has {len(digest)} digest bytes, "
            f"{algorithm.value} needs {algorithm.digest_size}",
            header,
        )

    return Signature(algorithm=algorithm, digest=digest)


def generate_mac(payload: bytes, secret: str | bytes | None, algorithm: HashAlgorithm) -> bytes:
    """Compute the HMAC of a payload under the shared secret."""
    return hmac.new(
        key=_secret_bytes(secret),
        msg=payload,
        digestmod=algorithm.constructor,
    ).digest()


def check_mac(
    payload: bytes,
    digest: bytes,
    secret: str | bytes | None,
    algorithm: HashAlgorithm,
) -> bool:
    """Report whether digest is a valid HMAC tag for payload.

    The comparison runs in constant time.
    """
    expected = generate_mac(payload, secret, algorithm)
    return hmac.compare_digest(expected, digest)


def compute_signature(
    payload: bytes,
    secret: str | bytes | None,
    algorithm: HashAlgorithm = HashAlgorithm.SHA256,
) -> str:
    """Compute a signature header value for payload, as GitHub would send it."""
    return str(Signature(algorithm=algorithm, digest=generate_mac(payload, secret, algorithm)))


def validate_signature(header: str, payload: bytes, secret: str | bytes | None) -> None:
    """Validate the signature header for the given raw payload.

    Args:
        header: Signature header value, e.g. "sha256=<hexdigest>"
        payload: Raw request body bytes exactly as received
        secret: The webhook secret configured in GitHub

    Raises:
        MissingSignatureError: If header is empty
        MalformedSignatureHeaderError: If header cannot be parsed
        InvalidSignatureError: If the MAC does not match
    """
    signature = parse_signature(header)

    if not check_mac(payload, signature.digest, secret, signature.algorithm):
        logger.warning("Webhook signature validation failed (%s)", signature.algorithm.value)
        raise InvalidSignatureError(signature.algorithm.value)

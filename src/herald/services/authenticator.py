"""Request authentication for the webhook endpoint."""

import logging
import time

from herald.errors.exceptions import InvalidRequestError, MethodNotAllowedError
from herald.services.signature import build_signed_message, verify_signature

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def _timestamp_is_fresh(timestamp: str, max_age_seconds: int, now: float | None) -> bool:
    try:
        signed_at = int(timestamp)
    except ValueError:
        return False
    current = time.time() if now is None else now
    return abs(current - signed_at) <= max_age_seconds


def authenticate_request(
    method: str,
    signature: str | None,
    timestamp: str | None,
    body: bytes,
    public_key: str,
    max_age_seconds: int | None = None,
    now: float | None = None,
) -> bytes:
    """Check that a webhook request was signed by the application's key.

    Args:
        method: HTTP method of the request.
        signature: Hex Ed25519 signature header value.
        timestamp: Signature timestamp header value.
        body: Raw request body.
        public_key: Hex Ed25519 public key of the application.
        max_age_seconds: Optional replay window for the timestamp.
        now: Current unix time, for tests.

    Returns:
        The raw body, ready for parsing.

    Raises:
        MethodNotAllowedError: If the method is not POST.
        InvalidRequestError: For every authentication failure. The message is
            only logged, callers always see the same 401.
    """
    if method.upper() != "POST":
        raise MethodNotAllowedError(method)

    if not (signature and timestamp and body):
        raise InvalidRequestError("Missing signature, timestamp or body")

    if max_age_seconds is not None and not _timestamp_is_fresh(timestamp, max_age_seconds, now):
        raise InvalidRequestError("Signature timestamp outside the allowed window")

    message = build_signed_message(timestamp, body)
    if not verify_signature(public_key, signature, message):
        raise InvalidRequestError("Signature verification failed")

    return body

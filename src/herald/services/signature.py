"""Ed25519 signature verification for inbound webhook requests."""

import re

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from herald.errors.exceptions import MalformedHexError

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def decode_hex(text: str) -> bytes:
    """Decode a separator-free hex string into bytes.

    Raises:
        MalformedHexError: If the length is odd or a pair is not hexadecimal.
    """
    if not _HEX_RE.fullmatch(text):
        raise MalformedHexError(f"not a hex byte string ({len(text)} chars)")
    return bytes.fromhex(text)


def encode_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex, two characters per byte."""
    return data.hex()


def build_signed_message(timestamp: str, body: bytes) -> bytes:
    """Return the bytes the platform signs: the timestamp followed by the raw body."""
    return timestamp.encode("utf-8") + body


def verify_signature(public_key_hex: str, signature_hex: str, message: bytes) -> bool:
    """Verify an Ed25519 signature over ``message``.

    Any decoding, key import or verification failure yields False.
    """
    try:
        public_key = Ed25519PublicKey.from_public_bytes(decode_hex(public_key_hex))
        public_key.verify(decode_hex(signature_hex), message)
    except (InvalidSignature, ValueError):
        return False
    return True

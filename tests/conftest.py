"""Shared test fixtures."""

import json

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from httpx import ASGITransport, AsyncClient

from herald.config import settings
from herald.integrations.adapters.base import LogRecord, LogSink

WEBHOOK_URL = "/api/v1/webhooks/events"
TIMESTAMP = "1700000000"


class RecordingSink(LogSink):
    """Keeps written records in memory and counts flushes."""

    sink_type = "recording"

    def __init__(self) -> None:
        self.records: list[LogRecord] = []
        self.flush_count = 0

    def write(self, record: LogRecord) -> None:
        self.records.append(record)

    async def flush(self) -> None:
        self.flush_count += 1


def public_key_hex(private_key: Ed25519PrivateKey) -> str:
    raw = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return raw.hex()


def sign(private_key: Ed25519PrivateKey, timestamp: str, body: bytes) -> str:
    """Sign the way the platform does: timestamp bytes followed by the body."""
    return private_key.sign(timestamp.encode("utf-8") + body).hex()


@pytest.fixture
def signing_key(monkeypatch):
    """Generate a keypair and install its public half as the configured key."""
    private_key = Ed25519PrivateKey.generate()
    monkeypatch.setattr(settings, "public_key", public_key_hex(private_key))
    return private_key


@pytest.fixture
def sinks() -> list[RecordingSink]:
    """Every sink handed out by the app, one per request, in order."""
    return []


@pytest.fixture
def app(sinks):
    """Create a test application instance with a recording sink factory."""
    from herald.main import create_app

    def _factory() -> RecordingSink:
        sink = RecordingSink()
        sinks.append(sink)
        return sink

    _app = create_app()
    _app.state.sink_factory = _factory
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def post_signed(client, signing_key):
    """Return a coroutine that posts a correctly signed webhook body."""

    async def _post(payload, timestamp: str = TIMESTAMP, **kwargs):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        headers = {
            "X-Signature-Ed25519": sign(signing_key, timestamp, body),
            "X-Signature-Timestamp": timestamp,
            "Content-Type": "application/json",
        }
        headers.update(kwargs.pop("headers", {}))
        return await client.post(WEBHOOK_URL, content=body, headers=headers, **kwargs)

    return _post


@pytest.fixture
def sign_body(signing_key):
    """Return a function signing (timestamp, body) with the installed key."""

    def _sign(timestamp: str, body: bytes) -> str:
        return sign(signing_key, timestamp, body)

    return _sign


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()

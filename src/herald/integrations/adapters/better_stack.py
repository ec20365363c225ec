"""Better Stack sink adapter: ships webhook log records over HTTP ingestion."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from herald.integrations.adapters.base import LogRecord, LogSink

logger = logging.getLogger(__name__)


class BetterStackSink(LogSink):
    """Buffers records and posts them to the Better Stack ingest endpoint.

    The source token is sent as a Bearer credential. Each flush posts the
    buffered records as a single JSON array and empties the buffer, so a
    record is sent at most once.
    """

    sink_type: str = "better_stack"

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str,
        url: str = "https://in.logs.betterstack.com",
        timeout: float = 10.0,
    ) -> None:
        self._client = client
        self._token = token
        self._url = url
        self._timeout = timeout
        self._buffer: list[LogRecord] = []

    @property
    def pending(self) -> int:
        return len(self._buffer)

    def write(self, record: LogRecord) -> None:
        self._buffer.append(record)

    @staticmethod
    def _serialize(record: LogRecord) -> dict[str, Any]:
        return {
            **record.context,
            "dt": record.dt.isoformat(),
            "level": str(record.level),
            "message": record.message,
        }

    async def flush(self) -> None:
        """Post buffered records; delivery errors never propagate."""
        if not self._buffer:
            return
        records, self._buffer = self._buffer, []

        try:
            response = await self._client.post(
                self._url,
                json=[self._serialize(r) for r in records],
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("Better Stack delivery failed (%d records): %s", len(records), exc)
            return

        if response.status_code >= 300:
            logger.warning(
                "Better Stack returned %s for %d records",
                response.status_code,
                len(records),
            )

"""Sink that discards records; local structlog output still carries them."""

from herald.integrations.adapters.base import LogRecord, LogSink


class NullSink(LogSink):
    sink_type: str = "null"

    def write(self, record: LogRecord) -> None:
        pass

    async def flush(self) -> None:
        pass

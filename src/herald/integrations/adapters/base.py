"""Abstract base class for log sink adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from herald.models.enums import LogLevel


@dataclass
class LogRecord:
    """A single (level, message, context) entry bound for a sink."""

    level: LogLevel
    message: str
    context: dict[str, Any] = field(default_factory=dict)
    dt: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LogSink(ABC):
    """Receives webhook log records and delivers them somewhere.

    Sinks are created per request. ``write`` must not block or raise on
    delivery problems; network work belongs in ``flush``.
    """

    sink_type: str = "unknown"

    @abstractmethod
    def write(self, record: LogRecord) -> None:
        """Accept a record for delivery."""
        ...

    @abstractmethod
    async def flush(self) -> None:
        """Deliver buffered records. Failures are logged and swallowed."""
        ...

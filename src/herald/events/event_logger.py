"""Request-scoped logger that fans webhook records out to a log sink."""

from __future__ import annotations

import logging
from typing import Any

import structlog
from fastapi import BackgroundTasks

from herald.integrations.adapters.base import LogRecord, LogSink
from herald.models.enums import LogLevel

_local = structlog.stdlib.get_logger(__name__)

_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class EventLogger:
    """Writes each record to the local log and to the request's sink.

    When ``background_tasks`` is given, the sink flush is registered as a
    task that runs after the response has been sent.
    """

    def __init__(
        self,
        sink: LogSink,
        trace_id: str | None = None,
        background_tasks: BackgroundTasks | None = None,
    ) -> None:
        self.sink = sink
        self.trace_id = trace_id
        if background_tasks is not None:
            background_tasks.add_task(sink.flush)

    def log(self, level: LogLevel, message: str, context: dict[str, Any]) -> None:
        record_context = dict(context)
        if self.trace_id:
            record_context.setdefault("trace_id", self.trace_id)

        _local.log(_STDLIB_LEVELS[level], message, webhook=context)
        self.sink.write(LogRecord(level=level, message=message, context=record_context))

    def info(self, message: str, context: dict[str, Any]) -> None:
        self.log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: dict[str, Any]) -> None:
        self.log(LogLevel.WARNING, message, context)

    def error(self, message: str, context: dict[str, Any]) -> None:
        self.log(LogLevel.ERROR, message, context)

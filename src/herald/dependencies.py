"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import BackgroundTasks, Depends, Request

from herald.events.event_logger import EventLogger
from herald.integrations.adapters.base import LogSink


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


def get_log_sink(request: Request) -> LogSink:
    """Build a fresh sink for this request from the app's sink factory."""
    return request.app.state.sink_factory()


def get_event_logger(
    background_tasks: BackgroundTasks,
    sink: LogSink = Depends(get_log_sink),
    trace_id: str = Depends(get_trace_id),
) -> EventLogger:
    """Return a request-scoped event logger whose sink flushes after the response."""
    return EventLogger(sink, trace_id=trace_id, background_tasks=background_tasks)


# Type aliases for dependency injection
WebhookLogger = Annotated[EventLogger, Depends(get_event_logger)]

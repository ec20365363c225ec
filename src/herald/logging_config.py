"""Structured logging configuration using structlog.

Webhook records are emitted through structlog as well, so the local log
always carries what was sent to the configured sink.
"""

import logging
import sys

import structlog

SERVICE_NAME = "herald"


def add_service_name(logger, method_name: str, event_dict: dict) -> dict:
    """Tag every entry with the service name for multi-service log search."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Logging level string (debug/info/warning/error).
        json_output: If True, one JSON object per line with tracebacks as
            structured dicts. If False, colored console output.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        add_service_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if json_output:
        final_processors = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        final_processors = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final_processors],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Access lines duplicate the trace-id middleware; httpx logs every sink post
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def bind_request_context(trace_id: str, method: str | None = None, path: str | None = None) -> None:
    """Bind the trace id, and the method and path when given, for the current request."""
    ctx = {"trace_id": trace_id}
    if method:
        ctx["method"] = method
    if path:
        ctx["path"] = path
    structlog.contextvars.bind_contextvars(**ctx)


def clear_request_context() -> None:
    """Clear bound context variables after a request."""
    structlog.contextvars.clear_contextvars()

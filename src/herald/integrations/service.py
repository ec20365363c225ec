"""Builds the per-request log sink factory from settings."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from herald.config import Settings
from herald.integrations.adapters import AVAILABLE_SINKS, import_sink
from herald.integrations.adapters.base import LogSink

logger = logging.getLogger(__name__)

SinkFactory = Callable[[], LogSink]


def create_sink_factory(settings: Settings, client: httpx.AsyncClient) -> SinkFactory:
    """Return a callable producing a fresh sink for every request.

    Raises:
        ValueError: If the configured sink type is unknown.
    """
    sink_type = settings.effective_log_sink
    if sink_type not in AVAILABLE_SINKS:
        raise ValueError(f"Unknown log sink '{sink_type}'. Available: {sorted(AVAILABLE_SINKS)}")
    if sink_type != settings.log_sink:
        logger.warning("No Better Stack token configured, webhook records stay in the local log")

    sink_cls = import_sink(AVAILABLE_SINKS[sink_type])
    if sink_type == "better_stack":
        return lambda: sink_cls(
            client,
            settings.better_stack_token,
            url=settings.better_stack_url,
            timeout=settings.sink_timeout_seconds,
        )
    return sink_cls

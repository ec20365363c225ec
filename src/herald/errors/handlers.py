"""FastAPI exception handlers producing empty-body rejections."""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from herald.api.router import API_PREFIX
from herald.api.routes.webhooks import WEBHOOK_PATH
from herald.errors.exceptions import HeraldError, MethodNotAllowedError

logger = logging.getLogger(__name__)


def _is_webhook_path(path: str) -> bool:
    return path == f"{API_PREFIX}{WEBHOOK_PATH}"


def _rejection(request: Request, exc: HeraldError) -> Response:
    logger.warning(
        "webhook_rejected",
        extra={
            "path": request.url.path,
            "method": request.method,
            "trace_id": getattr(request.state, "trace_id", "unknown"),
            "code": exc.code,
            "reason": exc.message,
        },
    )
    headers = {"Allow": "POST"} if isinstance(exc, MethodNotAllowedError) else None
    return Response(status_code=exc.status_code, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(HeraldError)
    async def herald_error_handler(request: Request, exc: HeraldError):
        return _rejection(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def routing_error_handler(request: Request, exc: StarletteHTTPException):
        # Verbs the webhook route does not list are refused by the router itself
        if exc.status_code == 405 and _is_webhook_path(request.url.path):
            return _rejection(request, MethodNotAllowedError(request.method))
        return await http_exception_handler(request, exc)

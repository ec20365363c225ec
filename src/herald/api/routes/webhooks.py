"""Inbound application webhook endpoint."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import Response

from herald.config import settings
from herald.dependencies import WebhookLogger
from herald.services.authenticator import SIGNATURE_HEADER, TIMESTAMP_HEADER, authenticate_request
from herald.services.dispatcher import dispatch_webhook, parse_webhook

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Webhooks"])

WEBHOOK_PATH = "/webhooks/events"

# Common methods are routed here so non-POST requests get an empty 405;
# any other verb is answered the same way by the 405 exception handler
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(WEBHOOK_PATH, methods=_ALL_METHODS, status_code=204)
async def receive_webhook(request: Request, event_logger: WebhookLogger) -> Response:
    """Authenticate, parse and dispatch a webhook from the platform.

    Signature and timestamp come from the ``X-Signature-Ed25519`` and
    ``X-Signature-Timestamp`` headers. Responses never carry a body.
    """
    body = authenticate_request(
        request.method,
        request.headers.get(SIGNATURE_HEADER),
        request.headers.get(TIMESTAMP_HEADER),
        await request.body(),
        settings.public_key,
        max_age_seconds=settings.signature_max_age_seconds,
    )

    payload = parse_webhook(body)
    outcome = dispatch_webhook(payload, event_logger)
    logger.debug("Webhook dispatched with outcome %s", outcome.name)
    return Response(status_code=int(outcome))

"""Classify verified webhook envelopes and emit one log record per event."""

from __future__ import annotations

import json

from herald.events.event_logger import EventLogger
from herald.models.enums import IntegrationType, WebhookEventType, WebhookOutcome, WebhookType
from herald.models.webhook import UnrecognizedEventType, WebhookEventBody, WebhookPayload

PING_MESSAGE = "Ping."
UNEXPECTED_WEBHOOK_TYPE_MESSAGE = "Unexpected application webhook type."
UNEXPECTED_EVENT_TYPE_MESSAGE = "Received unexpected application webhook event type."
UNEXPECTED_INTEGRATION_TYPE_MESSAGE = "Received unexpected application integration type."

INTEGRATION_MESSAGES: dict[IntegrationType, str] = {
    IntegrationType.GUILD_INSTALL: "Guild joined.",
    IntegrationType.USER_INSTALL: "User installed application.",
}

# APPLICATION_AUTHORIZED is keyed on the integration type instead
EVENT_MESSAGES: dict[WebhookEventType, str] = {
    WebhookEventType.APPLICATION_DEAUTHORIZED: "User deauthorised application.",
    WebhookEventType.ENTITLEMENT_CREATE: "Entitlement created.",
    WebhookEventType.ENTITLEMENT_UPDATE: "Entitlement updated.",
    WebhookEventType.ENTITLEMENT_DELETE: "Entitlement deleted.",
    WebhookEventType.QUEST_USER_ENROLLMENT: "Quest user enrollment.",
}


def parse_webhook(body: bytes) -> WebhookPayload:
    """Decode a verified request body.

    Malformed JSON or a broken envelope is a contract violation by an
    authenticated sender; the error propagates to the caller unhandled.
    """
    return WebhookPayload.model_validate(json.loads(body))


def log_webhook_event(event: WebhookEventBody, event_logger: EventLogger) -> None:
    """Emit the log record for a single application event."""
    context = {
        "event": event.model_dump(mode="json", exclude_unset=True),
        "timestamp": event.timestamp,
    }
    kind = event.kind

    if isinstance(kind, UnrecognizedEventType):
        event_logger.warning(UNEXPECTED_EVENT_TYPE_MESSAGE, context)
        return

    if kind is WebhookEventType.APPLICATION_AUTHORIZED:
        integration = event.integration_kind
        if isinstance(integration, IntegrationType):
            event_logger.info(INTEGRATION_MESSAGES[integration], context)
        else:
            event_logger.warning(UNEXPECTED_INTEGRATION_TYPE_MESSAGE, context)
        return

    event_logger.info(EVENT_MESSAGES[kind], context)


def dispatch_webhook(payload: WebhookPayload, event_logger: EventLogger) -> WebhookOutcome:
    """Route an envelope by type and return the outcome for the response."""
    kind = payload.kind

    if kind is WebhookType.PING:
        event_logger.info(PING_MESSAGE, payload.as_log_context())
        return WebhookOutcome.ACKNOWLEDGED

    if kind is not WebhookType.EVENT:
        event_logger.error(UNEXPECTED_WEBHOOK_TYPE_MESSAGE, payload.as_log_context())
        return WebhookOutcome.REJECTED

    log_webhook_event(payload.event, event_logger)
    return WebhookOutcome.ACKNOWLEDGED

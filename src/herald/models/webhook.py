"""Pydantic models for inbound application webhook envelopes.

Discriminators are kept as raw values on the models and resolved into a known
enum member or an ``Unrecognized*`` wrapper, so new platform values never fail
validation.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from herald.models.enums import IntegrationType, WebhookEventType, WebhookType


@dataclass(frozen=True)
class UnrecognizedWebhookType:
    value: Any


@dataclass(frozen=True)
class UnrecognizedEventType:
    value: Any


@dataclass(frozen=True)
class UnrecognizedIntegrationType:
    value: Any


WebhookKind = WebhookType | UnrecognizedWebhookType
EventKind = WebhookEventType | UnrecognizedEventType
IntegrationKind = IntegrationType | UnrecognizedIntegrationType


def _resolve(enum_cls, wrapper, value):
    # bool is an int subclass; True must not resolve to member 1
    if isinstance(value, bool):
        return wrapper(value)
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return wrapper(value)


class WebhookEventBody(BaseModel):
    """The ``event`` record of an event envelope."""

    model_config = ConfigDict(extra="allow")

    type: Any = None
    timestamp: Any = None
    data: Any = None

    @property
    def kind(self) -> EventKind:
        return _resolve(WebhookEventType, UnrecognizedEventType, self.type)

    @property
    def integration_kind(self) -> IntegrationKind:
        """Install context of an APPLICATION_AUTHORIZED event."""
        value = self.data.get("integration_type") if isinstance(self.data, dict) else None
        return _resolve(IntegrationType, UnrecognizedIntegrationType, value)


class WebhookPayload(BaseModel):
    """Top-level webhook envelope sent by the platform."""

    model_config = ConfigDict(extra="allow")

    version: Any = None
    application_id: Any = None
    type: Any = None
    event: WebhookEventBody | None = None

    @model_validator(mode="after")
    def _event_body_required(self):
        if self.kind is WebhookType.EVENT and self.event is None:
            raise ValueError("event envelope is missing its event body")
        return self

    @property
    def kind(self) -> WebhookKind:
        return _resolve(WebhookType, UnrecognizedWebhookType, self.type)

    def as_log_context(self) -> dict[str, Any]:
        """Return the envelope as received, for structured log context."""
        return self.model_dump(mode="json", exclude_unset=True)

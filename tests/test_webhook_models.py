"""Tests for webhook envelope models and discriminator resolution."""

import pytest
from pydantic import ValidationError

from herald.models.enums import IntegrationType, WebhookEventType, WebhookType
from herald.models.webhook import (
    UnrecognizedEventType,
    UnrecognizedIntegrationType,
    UnrecognizedWebhookType,
    WebhookPayload,
)


def _event(event_type="ENTITLEMENT_CREATE", data=None):
    return {
        "version": 1,
        "application_id": "1234567890",
        "type": 1,
        "event": {
            "type": event_type,
            "timestamp": "2024-10-18T14:42:53.064834",
            "data": data if data is not None else {},
        },
    }


def test_ping_envelope():
    payload = WebhookPayload.model_validate({"version": 1, "application_id": "1", "type": 0})
    assert payload.kind is WebhookType.PING
    assert payload.event is None


def test_event_envelope():
    payload = WebhookPayload.model_validate(_event())
    assert payload.kind is WebhookType.EVENT
    assert payload.event.kind is WebhookEventType.ENTITLEMENT_CREATE
    assert payload.event.timestamp == "2024-10-18T14:42:53.064834"


@pytest.mark.parametrize("raw_type", [2, -1, "PING", "1", None, [1]])
def test_unknown_envelope_type_is_wrapped(raw_type):
    payload = WebhookPayload.model_validate({"type": raw_type})
    assert payload.kind == UnrecognizedWebhookType(raw_type)


def test_boolean_envelope_type_is_not_event():
    payload = WebhookPayload.model_validate({"type": True, "event": {"type": "X"}})
    assert isinstance(payload.kind, UnrecognizedWebhookType)


def test_event_envelope_requires_event_body():
    with pytest.raises(ValidationError):
        WebhookPayload.model_validate({"version": 1, "application_id": "1", "type": 1})


def test_unknown_event_type_keeps_raw_value():
    payload = WebhookPayload.model_validate(_event("LOBBY_MESSAGE_CREATE"))
    assert payload.event.kind == UnrecognizedEventType("LOBBY_MESSAGE_CREATE")


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"integration_type": 0}, IntegrationType.GUILD_INSTALL),
        ({"integration_type": 1}, IntegrationType.USER_INSTALL),
        ({"integration_type": 7}, UnrecognizedIntegrationType(7)),
        ({}, UnrecognizedIntegrationType(None)),
    ],
)
def test_integration_kind(data, expected):
    payload = WebhookPayload.model_validate(_event("APPLICATION_AUTHORIZED", data))
    assert payload.event.integration_kind == expected


def test_integration_kind_without_data():
    payload = WebhookPayload.model_validate(
        {"type": 1, "event": {"type": "APPLICATION_AUTHORIZED", "timestamp": "t"}}
    )
    assert payload.event.integration_kind == UnrecognizedIntegrationType(None)


def test_log_context_preserves_envelope():
    """Unknown fields survive and defaults are not invented."""
    raw = _event("QUEST_USER_ENROLLMENT", {"quest_id": "99"})
    raw["future_field"] = {"nested": True}
    payload = WebhookPayload.model_validate(raw)
    assert payload.as_log_context() == raw


def test_log_context_omits_unset_fields():
    payload = WebhookPayload.model_validate({"type": 0})
    assert payload.as_log_context() == {"type": 0}


def test_missing_envelope_type_is_unrecognized():
    payload = WebhookPayload.model_validate({"version": 1, "application_id": "1"})
    assert payload.kind == UnrecognizedWebhookType(None)


@pytest.mark.parametrize("event", [{"type": None}, {}, {"type": {"nested": 1}}])
def test_irregular_event_type_is_unrecognized(event):
    payload = WebhookPayload.model_validate({"type": 1, "event": event})
    assert isinstance(payload.event.kind, UnrecognizedEventType)


@pytest.mark.parametrize("data", [[], "guild", 0])
def test_integration_kind_ignores_non_mapping_data(data):
    payload = WebhookPayload.model_validate(
        {"type": 1, "event": {"type": "APPLICATION_AUTHORIZED", "data": data}}
    )
    assert payload.event.integration_kind == UnrecognizedIntegrationType(None)

"""Enums for the application webhook protocol."""

from enum import IntEnum, StrEnum


class WebhookType(IntEnum):
    PING = 0
    EVENT = 1


class WebhookEventType(StrEnum):
    APPLICATION_AUTHORIZED = "APPLICATION_AUTHORIZED"
    APPLICATION_DEAUTHORIZED = "APPLICATION_DEAUTHORIZED"
    ENTITLEMENT_CREATE = "ENTITLEMENT_CREATE"
    ENTITLEMENT_UPDATE = "ENTITLEMENT_UPDATE"
    ENTITLEMENT_DELETE = "ENTITLEMENT_DELETE"
    QUEST_USER_ENROLLMENT = "QUEST_USER_ENROLLMENT"


class IntegrationType(IntEnum):
    GUILD_INSTALL = 0
    USER_INSTALL = 1


class LogLevel(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class WebhookOutcome(IntEnum):
    """HTTP status returned once a verified webhook has been dispatched."""

    ACKNOWLEDGED = 204
    REJECTED = 403

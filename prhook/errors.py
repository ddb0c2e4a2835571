"""Errors raised along the webhook pipeline."""

from __future__ import annotations


class BridgeError(Exception):
    """Base class for every request-scoped failure."""


class ConfigError(BridgeError):
    """A required setting is missing or malformed."""


class AuthError(BridgeError):
    """The request could not be authenticated."""


class MalformedSignature(AuthError):
    """Signature header is not ``sha256=<hex>``."""


class InvalidSignature(AuthError):
    """Signature is well formed but does not match the body."""


class DecodeError(BridgeError):
    """The payload could not be turned into a typed event."""


class UnsupportedEventType(DecodeError):
    """Event (or pull request action) the bridge does not handle."""


class MalformedPayload(DecodeError):
    """Payload of a known event type failed validation."""


class DeliveryError(BridgeError):
    """Discord rejected the message or could not be reached."""

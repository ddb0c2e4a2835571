"""Decoding of GitHub webhook deliveries into typed events."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from prhook.errors import MalformedPayload, UnsupportedEventType
from prhook.schemas import Event, PingEvent, PullRequestEvent

EVENT_MODELS: dict[str, type[BaseModel]] = {
    "ping": PingEvent,
    "pull_request": PullRequestEvent,
}


def _only_unknown_action(exc: ValidationError) -> bool:
    errors = exc.errors()
    return bool(errors) and all(
        err.get("loc") == ("action",)
        and err.get("type") == "enum"
        and isinstance(err.get("input"), str)
        for err in errors
    )


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def decode_event(event_type: str, payload: Any) -> Event:
    """
    Turn an ``X-GitHub-Event`` name and its JSON payload into an event.

    Raises
    ------
    UnsupportedEventType
        The event name is not one the bridge knows, or a ``pull_request``
        carries an action outside :class:`PullRequestAction`.
    MalformedPayload
        The payload does not have the shape of its event type.
    """
    event_key = (event_type or "").strip().lower()
    model = EVENT_MODELS.get(event_key)
    if model is None:
        raise UnsupportedEventType(f"unknown event type {event_type!r}")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        if _only_unknown_action(exc):
            action = payload.get("action") if isinstance(payload, dict) else None
            raise UnsupportedEventType(
                f"unknown {event_key} action {action!r}"
            ) from exc
        raise MalformedPayload(_describe(exc)) from exc

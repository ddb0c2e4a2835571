"""Ruter GH?"""

from __future__ import annotations

import json
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import PlainTextResponse

from prhook.config import Settings, load_settings
from prhook.errors import (
    AuthError,
    ConfigError,
    DeliveryError,
    InvalidSignature,
    MalformedPayload,
    UnsupportedEventType,
)
from prhook.request_log import RequestLog, get_request_log
from prhook.schemas import Message
from prhook.services.discord import send_message
from prhook.services.github import decode_event
from prhook.services.notify import Suppress, map_event
from prhook.utils import verify_signature

router = APIRouter(tags=["github"])

Sink = Callable[[str, Message], Awaitable[None]]


def get_settings(log: RequestLog = Depends(get_request_log)) -> Settings:
    """Settings are read again for every delivery."""
    try:
        return load_settings()
    except ConfigError as exc:
        log.config_failed(exc)
        raise


def get_sink() -> Sink:
    return send_message


def _text(body: str, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(body, status_code=status_code)


@router.post("/", response_class=PlainTextResponse)
async def github_webhook(
    request: Request,
    x_hub_signature_256: str | None = Header(None),
    x_github_event: str | None = Header(None),
    settings: Settings = Depends(get_settings),
    sink: Sink = Depends(get_sink),
    log: RequestLog = Depends(get_request_log),
):
    """
    GitHub webhook endpoint.

    The body is authenticated against `X-Hub-Signature-256` before it is parsed,
    then decoded according to `X-GitHub-Event` and forwarded to Discord when the
    event warrants a notification.
    """
    log.received(request.url.path, x_github_event)
    body = await request.body()

    if not x_hub_signature_256:
        log.auth_failed(AuthError("missing signature"))
        return _text("missing signature", 400)
    try:
        verify_signature(body, settings.secret_bytes, x_hub_signature_256)
    except AuthError as exc:
        log.auth_failed(exc)
        status = 401 if isinstance(exc, InvalidSignature) else 400
        return _text(f"invalid signature: {exc}", status)

    try:
        payload = json.loads(body)
    except ValueError:
        return _text("invalid payload", 400)
    if not x_github_event:
        return _text("missing event type", 400)

    try:
        event = decode_event(x_github_event, payload)
    except UnsupportedEventType as exc:
        log.decode_rejected(x_github_event, exc)
        return _text(f"unsupported event: {exc}")
    except MalformedPayload as exc:
        log.decode_rejected(x_github_event, exc)
        return _text(f"malformed payload: {exc}", 400)

    outcome = map_event(event, settings)
    if isinstance(outcome, Suppress):
        log.suppressed(x_github_event, outcome.reason)
        return _text(outcome.reason)

    try:
        await sink(settings.webhook_url, outcome.message)
    except DeliveryError as exc:
        log.delivery_failed(x_github_event, exc)
        return _text(f"error sending discord webhook: {exc}", 500)
    log.delivered(x_github_event)
    return "event handled successfully"

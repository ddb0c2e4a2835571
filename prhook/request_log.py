"""Logging hooks called at the webhook pipeline boundaries."""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "prhook.webhook"


class RequestLog:
    """
    Thin wrapper over a :class:`logging.Logger`.

    Handed to the GitHub router as a FastAPI dependency so tests can swap it.
    Never pass secret material to these methods.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def received(self, path: str, event_type: Optional[str]) -> None:
        self.logger.info("request received path=%s event=%s", path, event_type or "-")

    def config_failed(self, error: Exception) -> None:
        self.logger.error("error loading configuration: %s", error)

    def auth_failed(self, error: Exception) -> None:
        self.logger.warning("signature rejected: %s", error)

    def decode_rejected(self, event_type: str, error: Exception) -> None:
        self.logger.info("event %s not decoded: %s", event_type, error)

    def suppressed(self, event_type: str, reason: str) -> None:
        self.logger.info("event %s suppressed: %s", event_type, reason)

    def delivered(self, event_type: str) -> None:
        self.logger.info("event %s forwarded to discord", event_type)

    def delivery_failed(self, event_type: str, error: Exception) -> None:
        self.logger.error("event %s delivery failed: %s", event_type, error)


def get_request_log() -> RequestLog:
    return RequestLog()

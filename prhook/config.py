"""the beautiful world start from here."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from dotenv import load_dotenv

from prhook.errors import ConfigError

load_dotenv()

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class RecipientTable:
    """GitHub identity → Discord mention id lookups."""

    users: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    roles: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    reviewer_team: Optional[str] = None


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    github_secret: str
    webhook_url: str
    recipients: RecipientTable = field(default_factory=RecipientTable)

    @property
    def secret_bytes(self) -> bytes:
        return self.github_secret.encode()


def _required(environ: Mapping[str, str], name: str, *, strip: bool = True) -> str:
    value = environ.get(name, "")
    if not value.strip():
        raise ConfigError(f"{name} is not set")
    return value.strip() if strip else value


def parse_id_map(name: str, raw: str) -> Mapping[str, str]:
    """
    Parse a JSON object of identity → Discord id.

    Ids may be given as JSON strings or integers; both are stored as strings.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{name} is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{name} must be a JSON object")

    ids: dict[str, str] = {}
    for key, value in data.items():
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ConfigError(f"{name}[{key!r}] must be a string or integer id")
        ids[key] = str(value)
    return MappingProxyType(ids)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from the environment, raising ``ConfigError``."""
    env = os.environ if environ is None else environ
    team = env.get("GH_REVIEWER_TEAM", "").strip() or None
    return Settings(
        github_secret=_required(env, "GH_SECRET", strip=False),
        webhook_url=_required(env, "WEBHOOK_URL"),
        recipients=RecipientTable(
            users=parse_id_map("DC_USER_IDS", _required(env, "DC_USER_IDS")),
            roles=parse_id_map("DC_ROLE_IDS", _required(env, "DC_ROLE_IDS")),
            reviewer_team=team,
        ),
    )

import hashlib
import hmac
import json
from types import MappingProxyType
from typing import Any, Dict, Tuple

import pytest
from fastapi.testclient import TestClient

from prhook.app import app
from prhook.config import RecipientTable, Settings
from prhook.request_log import get_request_log
from prhook.routers.gh import get_settings, get_sink

WEBHOOK_SECRET = "test_secret"
WEBHOOK_URL = "https://discord.test/api/webhooks/1/abc"


def make_user(login: str, name: str | None = None) -> Dict[str, Any]:
    user = {
        "login": login,
        "id": 1,
        "html_url": f"https://github.com/{login}",
        "avatar_url": f"https://avatars.githubusercontent.com/{login}",
        "type": "User",
    }
    if name is not None:
        user["name"] = name
    return user


def make_pull_request_payload(action: str = "opened", **pr_overrides) -> Dict[str, Any]:
    pull_request = {
        "number": 42,
        "html_url": "https://github.com/octo/repo/pull/42",
        "title": "Fix bug",
        "state": "open",
        "user": make_user("alice"),
        "body": "Fixes the bug.",
        "draft": False,
        "merged": False,
        "additions": 5,
        "deletions": 2,
        "head": {"ref": "fix-bug"},
        "base": {"ref": "main"},
    }
    pull_request.update(pr_overrides)
    return {
        "action": action,
        "number": 42,
        "sender": make_user("alice"),
        "pull_request": pull_request,
        "repository": {
            "full_name": "octo/repo",
            "html_url": "https://github.com/octo/repo",
            "owner": make_user("octo"),
            "private": False,
        },
    }


class RecordingSink:
    def __init__(self, error: Exception | None = None):
        self.calls = []
        self.error = error

    async def __call__(self, webhook_url, message):
        self.calls.append((webhook_url, message))
        if self.error is not None:
            raise self.error


class RecordingLog:
    def __init__(self):
        self.entries = []

    def __getattr__(self, name):
        def _record(*args):
            self.entries.append((name, args))

        return _record

    def names(self):
        return [name for name, _ in self.entries]


@pytest.fixture
def recipients():
    return RecipientTable(
        users=MappingProxyType({"bob": "1001"}),
        roles=MappingProxyType({"frontend": "2002"}),
    )


@pytest.fixture
def settings(recipients):
    return Settings(
        github_secret=WEBHOOK_SECRET,
        webhook_url=WEBHOOK_URL,
        recipients=recipients,
    )


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def request_log():
    return RecordingLog()


@pytest.fixture
def client(settings, sink, request_log):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_sink] = lambda: sink
    app.dependency_overrides[get_request_log] = lambda: request_log
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def webhook_signature():
    """Fixture to generate webhook signatures for testing"""
    def _generate_signature(
        payload: Any, webhook_secret: str = WEBHOOK_SECRET
    ) -> Tuple[str, bytes]:
        payload_bytes = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        signature = hmac.new(
            key=webhook_secret.encode(),
            msg=payload_bytes,
            digestmod=hashlib.sha256
        ).hexdigest()
        return f"sha256={signature}", payload_bytes

    return _generate_signature


@pytest.fixture
def deliver(client, webhook_signature):
    """POST a signed delivery to the webhook endpoint."""
    def _deliver(event: str, payload: Any):
        signature, body = webhook_signature(payload)
        return client.post(
            "/",
            content=body,
            headers={
                "X-Hub-Signature-256": signature,
                "X-GitHub-Event": event,
                "Content-Type": "application/json",
            },
        )

    return _deliver

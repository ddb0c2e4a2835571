"""Ruter Ingfo?"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HTTP_HELP_TEXT = """GitHub → Discord pull request notifier

POST / : GitHub webhook (application/json, X-Hub-Signature-256 required)
GET  / : Health check"""


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    """Health check."""
    return HTTP_HELP_TEXT

"""Yet another discord services"""

from __future__ import annotations

from typing import Optional

import httpx

from prhook.errors import DeliveryError
from prhook.schemas import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    Message,
    PullRequest,
    PullRequestState,
    Repository,
    User,
)

HTTP_TIMEOUT_SECONDS = 15

COLOR_MERGED = 0x8957E5
COLOR_DRAFT = 0x6E7681
COLOR_OPEN = 0x238636
COLOR_CLOSED = 0xDA3633


def user_link(user: User) -> str:
    """``Name ([@login](url))``, or just the link when the user has no name."""
    link = f"[@{user.login}]({user.html_url})"
    if user.name:
        return f"{user.name} ({link})"
    return link


def pr_color(pr: PullRequest) -> int:
    if pr.merged:
        return COLOR_MERGED
    if pr.state is PullRequestState.OPEN:
        return COLOR_DRAFT if pr.draft else COLOR_OPEN
    return COLOR_CLOSED


def render_pr(pr: PullRequest, repo: Repository) -> Embed:
    """Embed describing a pull request."""
    return Embed(
        title=f"{pr.title} #{pr.number}",
        # an empty body renders as no description
        description=pr.body or None,
        url=pr.html_url,
        color=pr_color(pr),
        fields=(
            EmbedField(name="Author", value=user_link(pr.user), inline=False),
            EmbedField(name="Additions", value=f"**`+{pr.additions}`**", inline=True),
            EmbedField(name="Deletions", value=f"**`-{pr.deletions}`**", inline=True),
        ),
        author=EmbedAuthor(
            name=pr.user.login,
            url=pr.user.html_url,
            icon_url=pr.user.avatar_url,
        ),
        footer=EmbedFooter(text=repo.full_name, icon_url=repo.owner.avatar_url),
    )


async def send_message(
    webhook_url: str,
    message: Message,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> None:
    """POST a message to a Discord webhook. Never retried."""
    try:
        async with httpx.AsyncClient(
            timeout=HTTP_TIMEOUT_SECONDS, transport=transport
        ) as client:
            resp = await client.post(webhook_url, json=message.to_payload())
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise DeliveryError(f"{type(exc).__name__}: {exc}") from exc
    if resp.status_code >= 300:
        raise DeliveryError(f"Discord error: {resp.status_code} {resp.text}")

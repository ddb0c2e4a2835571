"""Mapping of decoded GitHub events to Discord notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from prhook.config import RecipientTable, Settings
from prhook.schemas import (
    Event,
    Message,
    PingEvent,
    PullRequestAction,
    PullRequestEvent,
    Team,
    User,
)
from prhook.services.discord import render_pr

SUPPRESS_PING = "liveness check, not an error"
SUPPRESS_ACTION = "action not handled"
SUPPRESS_NO_PING = "no ping configured for requested reviewer"
SUPPRESS_NO_REVIEWER = "no reviewer specified"
SUPPRESS_TEAM_NOT_WATCHED = "team not watched"


@dataclass(frozen=True)
class Send:
    message: Message


@dataclass(frozen=True)
class Suppress:
    reason: str


Outcome = Union[Send, Suppress]


def display_name(user: User) -> str:
    """The user's name, or their login in backticks when they have none."""
    if user.name:
        return user.name
    return f"`{user.login}`"


def user_mention(user: User, recipients: RecipientTable) -> str:
    """
    Mention for a requested reviewer.

    Users missing from the table are still announced, as plain text.
    """
    user_id = recipients.users.get(user.login)
    if user_id is not None:
        return f"<@{user_id}>"
    if user.name:
        return f"{user.name} (`{user.login}`)"
    return f"`{user.login}`"


def team_mention(team: Team, recipients: RecipientTable) -> Optional[str]:
    """Role mention for a requested team, ``None`` when the team is not ours."""
    role_id = recipients.roles.get(team.slug)
    if role_id is None:
        return None
    return f"<@&{role_id}>"


def _review_requested(event: PullRequestEvent, recipients: RecipientTable) -> Outcome:
    if event.requested_reviewer is not None:
        ping = user_mention(event.requested_reviewer, recipients)
    elif event.requested_team is not None:
        team = event.requested_team
        if recipients.reviewer_team and team.slug != recipients.reviewer_team:
            return Suppress(SUPPRESS_TEAM_NOT_WATCHED)
        ping = team_mention(team, recipients)
        if ping is None:
            return Suppress(SUPPRESS_NO_PING)
    else:
        return Suppress(SUPPRESS_NO_REVIEWER)
    return _announce(event, f"requested review from {ping}")


def _announce(event: PullRequestEvent, what: str) -> Send:
    return Send(
        Message(
            content=f"{display_name(event.sender)} {what}",
            embeds=(render_pr(event.pull_request, event.repository),),
        )
    )


def map_event(event: Event, settings: Settings) -> Outcome:
    """Decide whether and what to post to Discord for a decoded event."""
    if isinstance(event, PingEvent):
        return Suppress(SUPPRESS_PING)

    action = event.action
    if action is PullRequestAction.OPENED:
        return _announce(event, "opened a pull request")
    if action is PullRequestAction.REOPENED:
        return _announce(event, "reopened a pull request")
    if action is PullRequestAction.CLOSED:
        verb = "merged" if event.pull_request.merged else "closed"
        return _announce(event, f"{verb} a pull request")
    if action is PullRequestAction.REVIEW_REQUESTED:
        return _review_requested(event, settings.recipients)
    return Suppress(SUPPRESS_ACTION)

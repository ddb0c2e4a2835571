"""Schemas for GitHub webhook payloads and Discord webhook messages."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, model_validator


class _Frozen(BaseModel):
    # Unknown payload keys are ignored.
    model_config = ConfigDict(frozen=True, extra="ignore")


# GitHub


class User(_Frozen):
    login: StrictStr
    name: Optional[StrictStr] = None
    html_url: StrictStr
    avatar_url: StrictStr


class Team(_Frozen):
    slug: StrictStr
    name: StrictStr


class Repository(_Frozen):
    full_name: StrictStr
    html_url: StrictStr
    owner: User


class PullRequestAction(str, Enum):
    OPENED = "opened"
    EDITED = "edited"
    CLOSED = "closed"
    REOPENED = "reopened"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    REVIEW_REQUESTED = "review_requested"
    REVIEW_REQUEST_REMOVED = "review_request_removed"
    LABELED = "labeled"
    UNLABELED = "unlabeled"
    SYNCHRONIZE = "synchronize"


class PullRequestState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class PullRequest(_Frozen):
    number: StrictInt
    html_url: StrictStr
    title: StrictStr
    state: PullRequestState
    user: User
    body: Optional[StrictStr] = None
    draft: StrictBool
    merged: Optional[StrictBool] = None
    additions: StrictInt
    deletions: StrictInt

    @model_validator(mode="after")
    def _merged_implies_closed(self) -> "PullRequest":
        if self.merged and self.state is not PullRequestState.CLOSED:
            raise ValueError("a merged pull request must be closed")
        return self


class PingEvent(_Frozen):
    """``ping`` sent by GitHub when a hook is created."""

    hook_id: StrictInt
    zen: StrictStr


class PullRequestEvent(_Frozen):
    """``pull_request`` delivery."""

    action: PullRequestAction
    sender: User
    pull_request: PullRequest
    requested_reviewer: Optional[User] = None
    requested_team: Optional[Team] = None
    repository: Repository


Event = Union[PingEvent, PullRequestEvent]


# Discord


class EmbedField(_Frozen):
    name: str
    value: str
    inline: bool = False


class EmbedFooter(_Frozen):
    text: str
    icon_url: Optional[str] = None


class EmbedAuthor(_Frozen):
    name: str
    url: Optional[str] = None
    icon_url: Optional[str] = None


class Embed(_Frozen):
    title: str
    description: Optional[str] = None
    url: str
    color: int
    fields: tuple[EmbedField, ...] = ()
    footer: Optional[EmbedFooter] = None
    author: Optional[EmbedAuthor] = None


class Message(_Frozen):
    """Body POSTed to a Discord webhook."""

    content: str
    embeds: tuple[Embed, ...] = ()

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

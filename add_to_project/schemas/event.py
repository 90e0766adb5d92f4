"""Pydantic schema for the webhook event payload that triggered the workflow.

Only the handful of fields the action reads are modelled. Everything is
optional so that events carrying neither an issue nor a pull request still
parse, and the item simply ends up without labels or content.
"""

import json
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class EventModel(BaseModel):
    """Base model that tolerates the many payload fields we do not use."""

    model_config = ConfigDict(extra="ignore")


class EventLabel(EventModel):
    """A label attached to an issue or pull request."""

    name: str


class EventOwner(EventModel):
    """The owner of a repository."""

    login: str


class EventRepository(EventModel):
    """The repository the event originated from."""

    owner: EventOwner | None = None


class EventIssue(EventModel):
    """An issue or pull request as delivered in an event payload."""

    node_id: str | None = None
    number: int | None = None
    html_url: str | None = None
    labels: list[EventLabel] = Field(default_factory=list)


class EventPayload(EventModel):
    """The subset of the event payload read by the action."""

    issue: EventIssue | None = None
    pull_request: EventIssue | None = None
    repository: EventRepository | None = None


class ProjectItemContent(BaseModel):
    """The issue or pull request to add to the project."""

    model_config = ConfigDict(frozen=True)

    content_id: str | None = None
    number: int | None = None
    html_url: str | None = None
    owner_login: str | None = None
    labels: list[str] = Field(default_factory=list)

    @classmethod
    def from_event(cls, payload: EventPayload) -> "ProjectItemContent":
        """Build the item from the issue, or the pull request when there is no issue.

        Label names are lower-cased.
        """
        issue = payload.issue if payload.issue is not None else payload.pull_request
        owner_login = None
        if payload.repository is not None and payload.repository.owner is not None:
            owner_login = payload.repository.owner.login
        if issue is None:
            return cls(owner_login=owner_login)
        return cls(
            content_id=issue.node_id,
            number=issue.number,
            html_url=issue.html_url,
            owner_login=owner_login,
            labels=[label.name.lower() for label in issue.labels],
        )


def load_event_payload(event_path: Path | None) -> EventPayload:
    """Load the event payload from the file the runner points GITHUB_EVENT_PATH at.

    A missing path yields an empty payload, matching a run that was not
    triggered by an issue or pull request event.
    """
    if event_path is None:
        logger.warning("No event payload path provided, continuing with an empty payload")
        return EventPayload()
    logger.debug("Loading event payload", event_path=str(event_path))
    with open(event_path, encoding="utf-8") as f:
        data = json.load(f)
    return EventPayload.model_validate(data)

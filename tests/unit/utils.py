"""Utility functions and test doubles for unit tests."""

from typing import Any

from add_to_project.github.abc import ProjectClientBase
from add_to_project.schemas.project import OwnerType, ProjectField


class FakeProjectClient(ProjectClientBase):
    """In-memory project client that records every call it receives."""

    def __init__(self, project_id: str | None = "PVT_project", fields: list[ProjectField] | None = None) -> None:
        """Initialize the fake with the project ID and fields it should return."""
        self.project_id = project_id
        self.fields = fields or []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._item_counter = 0

    def _next_item_id(self) -> str:
        self._item_counter += 1
        return f"PVTI_item_{self._item_counter}"

    async def resolve_project_id(self, owner_type: OwnerType, owner_name: str, project_number: int) -> str | None:
        """Return the configured project ID."""
        self.calls.append(("resolve_project_id", (owner_type, owner_name, project_number)))
        return self.project_id

    async def get_custom_fields(self, project_id: str) -> list[ProjectField]:
        """Return the configured fields."""
        self.calls.append(("get_custom_fields", (project_id,)))
        return self.fields

    async def attach_item(self, project_id: str, content_id: str | None) -> str:
        """Return a new item ID for every call."""
        self.calls.append(("attach_item", (project_id, content_id)))
        return self._next_item_id()

    async def set_single_select_field(self, project_id: str, item_id: str, field_id: str, option_id: str) -> str | None:
        """Acknowledge the field update."""
        self.calls.append(("set_single_select_field", (project_id, item_id, field_id, option_id)))
        return item_id

    async def create_draft_issue(self, project_id: str, title: str | None) -> str:
        """Return a new item ID for every call."""
        self.calls.append(("create_draft_issue", (project_id, title)))
        return self._next_item_id()

    def call_names(self) -> list[str]:
        """Names of the methods called, in order."""
        return [name for name, _ in self.calls]


def build_issue_event(
    labels: list[str] | None = None,
    owner: str = "my-org",
    number: int = 42,
    key: str = "issue",
) -> dict[str, Any]:
    """Build a minimal issue (or pull request) event payload."""
    return {
        "action": "opened",
        key: {
            "node_id": f"I_node_{number}",
            "number": number,
            "html_url": f"https://github.com/{owner}/repo/issues/{number}",
            "labels": [{"name": label, "color": "ededed"} for label in labels or []],
        },
        "repository": {"name": "repo", "owner": {"login": owner, "type": "Organization"}},
    }



"""Contains results of application execution."""

from enum import Enum


class AddToProjectDecision(str, Enum):
    """What the workflow did with the triggering item."""

    SKIPPED = "skipped"
    ADDED_ITEM = "added_item"
    ADDED_DRAFT_ISSUE = "added_draft_issue"


class AddToProjectResult:
    """Contains results of the add-to-project workflow."""

    def __init__(
        self,
        decision: AddToProjectDecision,
        item_id: str | None = None,
        project_id: str | None = None,
        field_set: bool = False,
    ) -> None:
        """Initialize the result with the decision taken and the resulting project item ID."""
        self.decision = decision
        self.item_id = item_id
        self.project_id = project_id
        self.field_set = field_set

    @property
    def skipped(self) -> bool:
        """Whether the item was filtered out by the label filter."""
        return self.decision == AddToProjectDecision.SKIPPED

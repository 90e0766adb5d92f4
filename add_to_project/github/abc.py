"""Base ABC for GitHub Projects clients."""

from abc import ABC, abstractmethod

from add_to_project.schemas.project import OwnerType, ProjectField


class ProjectClientBase(ABC):
    """Base ABC for GitHub Projects clients."""

    # Lookups
    @abstractmethod
    async def resolve_project_id(self, owner_type: OwnerType, owner_name: str, project_number: int) -> str | None:
        """Get the node ID of a project owned by an organization or user."""
        pass

    @abstractmethod
    async def get_custom_fields(self, project_id: str) -> list[ProjectField]:
        """List the single-select custom fields defined on a project."""
        pass

    # Mutations
    @abstractmethod
    async def attach_item(self, project_id: str, content_id: str | None) -> str:
        """Add an issue or pull request to a project, returning the project item ID."""
        pass

    @abstractmethod
    async def set_single_select_field(self, project_id: str, item_id: str, field_id: str, option_id: str) -> str | None:
        """Set a single-select field on a project item, returning the updated item ID."""
        pass

    @abstractmethod
    async def create_draft_issue(self, project_id: str, title: str | None) -> str:
        """Create a draft issue in a project, returning the project item ID."""
        pass

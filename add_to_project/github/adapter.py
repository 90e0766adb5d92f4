"""GitHub Projects client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit.exception import GraphQLFailed, RequestFailed

from add_to_project.schemas.project import OwnerType, ProjectField

from .abc import ProjectClientBase
from .client import GitHubTokenClient, get_github_token_client
from .queries import (
    ADD_DRAFT_ISSUE_MUTATION,
    ADD_ITEM_MUTATION,
    GET_CUSTOM_FIELDS_QUERY,
    SET_SINGLE_SELECT_FIELD_MUTATION,
    get_project_id_query,
)

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def log_graphql_failures(func: F) -> F:
    """Decorator to log failed GraphQL calls with details before re-raising them unchanged."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except GraphQLFailed as exc:
            logger.error(
                "GitHub GraphQL request returned errors",
                function=func.__name__,
                error=str(exc),
            )
            raise
        except RequestFailed as exc:
            logger.error(
                "GitHub GraphQL request failed",
                function=func.__name__,
                status_code=exc.response.status_code,
                url=str(getattr(exc.response, "url", None)),
            )
            raise

    return wrapper  # type: ignore


class GitHubKitProjectAdapter(ProjectClientBase):
    """GitHub Projects client adapter for the githubkit library."""

    def __init__(self, client: GitHubTokenClient) -> None:
        """Initialize the adapter with an already-initialized client."""
        self.client = client

    @classmethod
    async def create(cls, github_token: str, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new GitHub Projects client adapter.

        Args:
            github_token: Token with access to the project and the item's repository
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitProjectAdapter instance
        """
        logger.info("Creating client for GitHub instance", github_api_url=github_api_url)
        client = await get_github_token_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client)

    async def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run a GraphQL document and return its `data` object."""
        return await self.client.async_graphql(query, variables)

    @log_graphql_failures
    async def resolve_project_id(self, owner_type: OwnerType, owner_name: str, project_number: int) -> str | None:
        """Get the node ID of a project owned by an organization or user."""
        data = await self._graphql(
            get_project_id_query(owner_type),
            {"projectOwnerName": owner_name, "projectNumber": project_number},
        )
        owner = data.get(owner_type.value) or {}
        project = owner.get("projectV2") or {}
        return project.get("id")

    @log_graphql_failures
    async def get_custom_fields(self, project_id: str) -> list[ProjectField]:
        """List the single-select custom fields defined on a project.

        Fields of other types come back as empty objects and are left out.
        """
        data = await self._graphql(GET_CUSTOM_FIELDS_QUERY, {"projectId": project_id})
        logger.debug("Requested custom fields", project_id=project_id, response=data)
        node = data.get("node") or {}
        nodes = (node.get("fields") or {}).get("nodes") or []
        return [ProjectField.model_validate(field) for field in nodes if field and field.get("id") and field.get("name")]

    @log_graphql_failures
    async def attach_item(self, project_id: str, content_id: str | None) -> str:
        """Add an issue or pull request to a project, returning the project item ID."""
        data = await self._graphql(ADD_ITEM_MUTATION, {"input": {"projectId": project_id, "contentId": content_id}})
        return data["addProjectV2ItemById"]["item"]["id"]

    @log_graphql_failures
    async def set_single_select_field(self, project_id: str, item_id: str, field_id: str, option_id: str) -> str | None:
        """Set a single-select field on a project item, returning the updated item ID."""
        data = await self._graphql(
            SET_SINGLE_SELECT_FIELD_MUTATION,
            {"projectId": project_id, "itemId": item_id, "fieldId": field_id, "optionId": option_id},
        )
        logger.debug("Set field value", response=data)
        item = (data.get("updateProjectV2ItemFieldValue") or {}).get("projectV2Item") or {}
        return item.get("id")

    @log_graphql_failures
    async def create_draft_issue(self, project_id: str, title: str | None) -> str:
        """Create a draft issue in a project, returning the project item ID."""
        data = await self._graphql(ADD_DRAFT_ISSUE_MUTATION, {"projectId": project_id, "title": title})
        return data["addProjectV2DraftIssue"]["projectItem"]["id"]

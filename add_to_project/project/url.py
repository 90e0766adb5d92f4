"""Parses GitHub project URLs."""

import structlog

from add_to_project.project.exceptions import InvalidProjectUrlError, UnsupportedOwnerTypeError
from add_to_project.schemas.project import OwnerType, ProjectReference
from add_to_project.utils.constants import PROJECT_URL_FORMAT, PROJECT_URL_PATTERN

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def must_get_owner_type_query(owner_type: str | None) -> OwnerType:
    """Map the owner segment of a project URL to its GraphQL owner type.

    Raises:
        UnsupportedOwnerTypeError: If the segment is not `orgs` or `users`.
    """
    if owner_type == "orgs":
        return OwnerType.ORGANIZATION
    if owner_type == "users":
        return OwnerType.USER
    raise UnsupportedOwnerTypeError(f"Unsupported ownerType: {owner_type}. Must be one of 'orgs' or 'users'")


def parse_project_url(project_url: str) -> ProjectReference:
    """Extract the owner type, owner name and project number from a project URL.

    Only the path matters, so URLs on GitHub Enterprise Server hosts parse the
    same way as github.com ones.

    Args:
        project_url: URL such as `https://github.com/orgs/my-org/projects/7`.

    Returns:
        The project reference.

    Raises:
        InvalidProjectUrlError: If the URL path does not match the expected format.
        UnsupportedOwnerTypeError: If the owner segment is not supported.
    """
    match = PROJECT_URL_PATTERN.search(project_url)
    if match is None:
        raise InvalidProjectUrlError(f"Invalid project URL: {project_url}. Project URL should match the format {PROJECT_URL_FORMAT}")

    project_number = int(match.group("project_number"), 10)
    if project_number < 1:
        raise InvalidProjectUrlError(f"Invalid project URL: {project_url}. Project number must be a positive integer")

    owner_type = must_get_owner_type_query(match.group("owner_type"))
    reference = ProjectReference(
        owner_type=owner_type,
        owner_name=match.group("owner_name"),
        project_number=project_number,
    )
    logger.debug(
        "Parsed project URL",
        project_owner=reference.owner_name,
        project_number=reference.project_number,
        project_owner_type=reference.owner_type.value,
    )
    return reference

"""Reconciles action configuration between CLI arguments and environment variables."""

import structlog

from add_to_project.configuration.exceptions import RequiredInputError
from add_to_project.configuration.models import AddToProjectConfig
from add_to_project.project.labels import parse_label_operator, parse_labeled

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def validate_required_input(value: str | None, name: str) -> str:
    """Validates that a required input is present and not blank.

    Args:
        value (str | None): The raw input value.
        name (str): The input name as declared in the action metadata, such as `project-url`.

    Raises:
        RequiredInputError: If the input is missing or only whitespace.

    Returns:
        str: The input value with surrounding whitespace removed.
    """
    if value is None or not value.strip():
        raise RequiredInputError(
            name=name,
            cli_name=f"--{name}",
            env_name=f"INPUT_{name.upper()}",
        )
    return value.strip()


async def reconcile_add_to_project_configuration(
    cli_project_url: str | None,
    cli_github_token: str | None,
    cli_labeled: str | None = None,
    cli_label_operator: str | None = None,
    cli_label_map: str | None = None,
    cli_github_api_url: str = "https://api.github.com",
    cli_debug: bool = False,
) -> AddToProjectConfig:
    """Reconciles the add-to-project configuration.

    Required inputs are checked in the order the action declares them, so a
    run missing every input reports `project-url` first.
    """
    project_url = await validate_required_input(cli_project_url, "project-url")
    github_token = await validate_required_input(cli_github_token, "github-token")

    label_map = cli_label_map if cli_label_map else None

    config = AddToProjectConfig(
        project_url=project_url,
        github_token=github_token,
        github_api_url=cli_github_api_url,
        labeled=parse_labeled(cli_labeled),
        label_operator=parse_label_operator(cli_label_operator),
        label_map=label_map,
        debug=cli_debug,
    )
    logger.debug(
        "Reconciled configuration",
        project_url=config.project_url,
        github_api_url=config.github_api_url,
        labeled=config.labeled,
        label_operator=config.label_operator.value,
        label_map=config.label_map,
    )
    return config

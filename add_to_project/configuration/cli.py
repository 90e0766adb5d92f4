"""Defines the Command Line Interface (CLI) using Typer.

Options fall back to the `INPUT_*` environment variables the Actions runner
sets for each action input, so the same entry point serves both the action
and local runs.
"""

import asyncio
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from add_to_project.configuration.driver import get_add_to_project_config
from add_to_project.configuration.env import get_settings
from add_to_project.configuration.models import AddToProjectConfig
from add_to_project.github.adapter import GitHubKitProjectAdapter
from add_to_project.schemas.event import EventPayload, load_event_payload
from add_to_project.synchronize.driver import run_add_to_project_workflow
from add_to_project.synchronize.results import AddToProjectResult
from add_to_project.utils.actions import error_message, set_failed, set_output
from add_to_project.utils.logging import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


async def run_action(config: AddToProjectConfig, payload: EventPayload) -> AddToProjectResult:
    """Create the GitHub client and run the workflow."""
    client = await GitHubKitProjectAdapter.create(github_token=config.github_token, github_api_url=config.github_api_url)
    return await run_add_to_project_workflow(config, payload, client)


@typer_app.command(name="add-to-project")
def add_to_project_cli(
    project_url: Annotated[str | None, Option(envvar="INPUT_PROJECT-URL", help="URL of the project to add issues to.")] = None,
    github_token: Annotated[
        str | None,
        Option(envvar="INPUT_GITHUB-TOKEN", help="Token with access to the project and the issue's repository.", show_default=False),
    ] = None,
    labeled: Annotated[str | None, Option(envvar="INPUT_LABELED", help="Comma-separated list of labels to filter items by.")] = None,
    label_operator: Annotated[
        str | None, Option(envvar="INPUT_LABEL-OPERATOR", help="How to apply the labels: and, or, not. Defaults to or.")
    ] = None,
    label_map: Annotated[
        str | None, Option(envvar="INPUT_LABEL-MAP", help="JSON map of field name to a list of {label, fieldValue} entries.")
    ] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    event_path: Annotated[Path | None, Option(envvar="GITHUB_EVENT_PATH", help="Path to the JSON event payload.")] = None,
    debug: Annotated[bool, Option(envvar="RUNNER_DEBUG", help="Enable debug logging.")] = False,
) -> None:
    """Adds the issue or pull request that triggered the workflow to a project."""
    try:
        settings = get_settings()
        configure_logging(debug=debug or settings.RUNNER_DEBUG)

        config = get_add_to_project_config(
            project_url=project_url,
            github_token=github_token,
            labeled=labeled,
            label_operator=label_operator,
            label_map=label_map,
            github_api_url=github_api_url or settings.GITHUB_API_URL,
            debug=debug,
        )
        payload = load_event_payload(event_path or settings.GITHUB_EVENT_PATH)
        result = asyncio.run(run_action(config, payload))
    except Exception as exc:
        message = error_message(exc)
        logger.error("Failed to add item to project", error=message, error_type=type(exc).__name__)
        set_failed(message)
        raise typer.Exit(1) from exc

    if result.skipped or result.item_id is None:
        logger.info("No project item created")
        return

    set_output("itemId", result.item_id, settings.GITHUB_OUTPUT)


if __name__ == "__main__":
    typer_app()

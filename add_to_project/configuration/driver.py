"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio

from add_to_project.configuration import reconcile
from add_to_project.configuration.models import AddToProjectConfig


def get_add_to_project_config(
    project_url: str | None = None,
    github_token: str | None = None,
    labeled: str | None = None,
    label_operator: str | None = None,
    label_map: str | None = None,
    github_api_url: str = "https://api.github.com",
    debug: bool = False,
) -> AddToProjectConfig:
    """Synchronously get the reconciled add-to-project configuration."""
    return asyncio.run(
        reconcile.reconcile_add_to_project_configuration(
            cli_project_url=project_url,
            cli_github_token=github_token,
            cli_labeled=labeled,
            cli_label_operator=label_operator,
            cli_label_map=label_map,
            cli_github_api_url=github_api_url,
            cli_debug=debug,
        )
    )

"""Helpers for talking to the GitHub Actions runner."""

import uuid
from pathlib import Path

import structlog
import typer

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def set_output(name: str, value: str, output_path: Path | None) -> None:
    """Set a step output by appending it to the file GITHUB_OUTPUT points at.

    Multi-line values use the heredoc form the runner expects. Without an
    output file (local runs) the output is only echoed.
    """
    typer.echo(f"{name}={value}")
    if output_path is None:
        logger.debug("No GITHUB_OUTPUT file, output only echoed", name=name)
        return
    with open(output_path, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")


def error_message(exc: BaseException) -> str:
    """Message reported for a failed run."""
    message = str(exc)
    if not message:
        return f"Unknown error: {type(exc).__name__}"
    return message


def set_failed(message: str) -> None:
    """Report a failure as an error annotation on the workflow run."""
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    typer.echo(f"::error::{escaped}")

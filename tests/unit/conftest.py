"""Fixtures for unit tests."""

import json
from pathlib import Path
from typing import Any, Callable, Generator

import pytest
import structlog

from add_to_project.schemas.project import ProjectField

from .utils import FakeProjectClient


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def priority_field() -> ProjectField:
    """A single-select Priority field with High and Low options."""
    return ProjectField.model_validate(
        {
            "id": "PVTSSF_priority",
            "name": "Priority",
            "options": [{"id": "opt_high", "name": "High"}, {"id": "opt_low", "name": "Low"}],
        }
    )


@pytest.fixture
def fake_client(priority_field: ProjectField) -> FakeProjectClient:
    """A fake project client for a project with a Priority field."""
    return FakeProjectClient(fields=[priority_field])


@pytest.fixture
def write_event(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write an event payload to a temporary file and return its path."""

    def _write(event: dict[str, Any]) -> Path:
        event_path = tmp_path / "event.json"
        event_path.write_text(json.dumps(event), encoding="utf-8")
        return event_path

    return _write

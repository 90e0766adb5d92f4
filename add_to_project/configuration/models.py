"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field
from enum import Enum


class LabelOperator(str, Enum):
    """Enum for the combinator applied to the `labeled` filter."""

    AND = "and"
    OR = "or"
    NOT = "not"


@dataclass
class AddToProjectConfig:
    """Configuration class for a single add-to-project run."""

    project_url: str
    github_token: str
    github_api_url: str = "https://api.github.com"
    labeled: list[str] = field(default_factory=list)
    label_operator: LabelOperator = LabelOperator.OR
    label_map: str | None = None
    debug: bool = False

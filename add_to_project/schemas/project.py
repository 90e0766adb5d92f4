"""Pydantic schemas for GitHub Projects (v2) data used by the action."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OwnerType(str, Enum):
    """Enum for project owner types, valued by their GraphQL root field."""

    ORGANIZATION = "organization"
    USER = "user"


class ProjectReference(BaseModel):
    """Identifies a project board from its URL."""

    model_config = ConfigDict(frozen=True)

    owner_type: OwnerType
    owner_name: str
    project_number: int = Field(gt=0)


class ProjectFieldOption(BaseModel):
    """An option of a single-select project field."""

    id: str
    name: str


class ProjectField(BaseModel):
    """A single-select custom field defined on a project."""

    id: str
    name: str
    options: list[ProjectFieldOption] = Field(default_factory=list)


class FieldResolution(BaseModel):
    """The custom field name and option value an item should be set to."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    field_value: str

"""Utility modules for shared functionality."""

from .constants import (
    MAX_PROJECT_FIELDS,
    PROJECT_URL_FORMAT,
    PROJECT_URL_PATTERN,
)

__all__ = [
    "PROJECT_URL_PATTERN",
    "PROJECT_URL_FORMAT",
    "MAX_PROJECT_FIELDS",
]

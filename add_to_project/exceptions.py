"""Base exception for the add-to-project action."""


class AddToProjectError(Exception):
    """Base class for errors that abort an add-to-project run."""

    pass

"""Custom exceptions for project URL handling."""

from add_to_project.exceptions import AddToProjectError


class InvalidProjectUrlError(AddToProjectError):
    """Raised when a project URL does not have the expected shape."""

    pass


class UnsupportedOwnerTypeError(AddToProjectError):
    """Raised when a project URL names an owner type other than orgs or users."""

    pass

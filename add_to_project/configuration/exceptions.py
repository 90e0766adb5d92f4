"""Contains exceptions raised when reconciling action configuration."""

from add_to_project.exceptions import AddToProjectError


class RequiredInputError(AddToProjectError):
    """Raised when a required input is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing input."""
        super().__init__(f"Input required and not supplied: {name}")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name

"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""


class MissingCollaboratorError(ConfigurationError):
    """Raised when a required collaborator is not supplied at construction time."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required collaborator: {name}")
        self.name = name

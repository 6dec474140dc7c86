"""Errors raised while reading IDE-supplied configuration."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """An environment variable holds a value the build cannot use.

    Attributes:
        variable: Name of the offending environment variable
        value: Raw value found in the environment
    """

    def __init__(self, message: str, variable: str, value: str):
        super().__init__(message)
        self.variable = variable
        self.value = value

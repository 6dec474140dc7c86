"""Core ports (interfaces) for konan-env.

These protocols define the boundary between the build plugin and the
sources of its IDE-supplied settings. Both variants of the environment
reader satisfy ``EnvironmentVariables`` structurally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentVariables(Protocol):
    """Building parameters passed by an IDE."""

    @property
    def build_output_dir(self) -> Path | None:
        """Destination directory for all compilation tasks, or None if unset."""

    @property
    def debug_symbols_enabled(self) -> bool:
        """Whether debug support is enabled for all artifacts."""

    @property
    def optimizations_enabled(self) -> bool:
        """Whether optimizations are enabled for all artifacts by default."""


@runtime_checkable
class ProjectProperties(Protocol):
    """Project-wide key-value property store."""

    def find_property(self, name: str) -> object | None:
        """Return the property value, or None if it is not defined."""

"""Environment variable readers for the build plugin.

Two readers exist: one that consults the process environment on every
access and one that ignores it entirely. Which one a build gets is decided
by the ``konan.useEnvironmentVariables`` project property (see
``env_factory``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .. import config
from ..core.errors import InvalidConfigurationError


class UnusedEnvironmentVariables:
    """Reader used when environment support is not enabled.

    Always reports unset values, whatever the environment contains.
    """

    @property
    def build_output_dir(self) -> Path | None:
        return None

    @property
    def debug_symbols_enabled(self) -> bool:
        return False

    @property
    def optimizations_enabled(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ProcessEnvironmentVariables:
    """Reader backed by the process environment.

    Values are looked up on each access, never cached.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    @property
    def build_output_dir(self) -> Path | None:
        value = self._environ.get(config.CONFIGURATION_BUILD_DIR)
        if value is None:
            return None
        path = Path(value)
        if not path.is_absolute():
            raise InvalidConfigurationError(
                f"A path passed using {config.CONFIGURATION_BUILD_DIR} should be absolute",
                variable=config.CONFIGURATION_BUILD_DIR,
                value=value,
            )
        return path

    @property
    def debug_symbols_enabled(self) -> bool:
        return self._is_enabled(config.DEBUGGING_SYMBOLS)

    @property
    def optimizations_enabled(self) -> bool:
        return self._is_enabled(config.KONAN_ENABLE_OPTIMIZATIONS)

    def _is_enabled(self, name: str) -> bool:
        value = self._environ.get(name)
        return value is not None and value.upper() == config.ENABLED_VALUE

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

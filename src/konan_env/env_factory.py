"""Selection of the environment reader for a build.

Usage:
    properties = MappingProjectProperties({"konan.useEnvironmentVariables": "true"})
    env = get_environment_variables(properties)
    if env.debug_symbols_enabled:
        ...

    # Or read everything at once
    snapshot = load_environment_config(properties)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from . import config
from .adapters.env_vars import ProcessEnvironmentVariables, UnusedEnvironmentVariables
from .core.config_model import EnvironmentConfig
from .core.ports import EnvironmentVariables, ProjectProperties

logger = logging.getLogger(__name__)


def use_environment_variables(properties: ProjectProperties) -> bool:
    """Check the opt-in project property.

    The property is on only when its string form equals "true", ignoring case.
    A missing property means off.
    """
    value = properties.find_property(config.USE_ENVIRONMENT_VARIABLES_PROPERTY)
    if value is None:
        return False
    return str(value).lower() == "true"


def get_environment_variables(
    properties: ProjectProperties, environ: Mapping[str, str] | None = None
) -> EnvironmentVariables:
    """Get the environment reader selected by the opt-in property.

    Args:
        properties: Project property store holding the opt-in flag
        environ: Mapping for the enabled reader (defaults to ``os.environ``)

    Returns:
        ProcessEnvironmentVariables when enabled, else UnusedEnvironmentVariables
    """
    if use_environment_variables(properties):
        logger.debug("%s is set, reading IDE settings from the environment",
                     config.USE_ENVIRONMENT_VARIABLES_PROPERTY)
        return ProcessEnvironmentVariables(environ)
    logger.debug("%s is not set, ignoring the environment",
                 config.USE_ENVIRONMENT_VARIABLES_PROPERTY)
    return UnusedEnvironmentVariables()


def load_environment_config(
    properties: ProjectProperties, environ: Mapping[str, str] | None = None
) -> EnvironmentConfig:
    """Read all IDE settings once into an immutable snapshot.

    Raises:
        InvalidConfigurationError: If CONFIGURATION_BUILD_DIR is not absolute
    """
    env = get_environment_variables(properties, environ)
    return EnvironmentConfig(
        build_output_dir=env.build_output_dir,
        debug_symbols_enabled=env.debug_symbols_enabled,
        optimizations_enabled=env.optimizations_enabled,
    )

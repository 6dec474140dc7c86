"""konan-env - IDE-supplied build parameters for the Kotlin/Native build plugin"""

__version__ = "1.0.0"
__description__ = "IDE-supplied build parameters for the Kotlin/Native build plugin"

from .core.config_model import EnvironmentConfig
from .core.errors import InvalidConfigurationError
from .env_factory import (
    get_environment_variables,
    load_environment_config,
    use_environment_variables,
)

__all__ = [
    "EnvironmentConfig",
    "InvalidConfigurationError",
    "get_environment_variables",
    "load_environment_config",
    "use_environment_variables",
    "__version__",
]

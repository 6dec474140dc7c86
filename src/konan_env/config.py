"""Names of the IDE-facing settings and optional .env loading"""

import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Environment variables set by the IDE
CONFIGURATION_BUILD_DIR = "CONFIGURATION_BUILD_DIR"
DEBUGGING_SYMBOLS = "DEBUGGING_SYMBOLS"
KONAN_ENABLE_OPTIMIZATIONS = "KONAN_ENABLE_OPTIMIZATIONS"

# Project property that opts in to reading them
USE_ENVIRONMENT_VARIABLES_PROPERTY = "konan.useEnvironmentVariables"

# Compared against the upper-cased value of the boolean variables
ENABLED_VALUE = "YES"


def load_env_file(path: str | Path) -> bool:
    """Load variables from a dotenv file into the process environment.

    Variables already present in the environment are left untouched.

    Returns:
        True if the file defined at least one variable
    """
    path = Path(path)
    if not path.is_file():
        logger.warning("Env file not found: %s", path)
        return False
    loaded = load_dotenv(path, override=False)
    logger.debug("Loaded env file %s (changed=%s)", path, loaded)
    return loaded

"""konan-env - print the build settings an IDE passes through the environment"""

import argparse
import json
import logging
import sys

from .adapters.project_properties import MappingProjectProperties
from .config import USE_ENVIRONMENT_VARIABLES_PROPERTY, load_env_file
from .core.errors import InvalidConfigurationError
from .env_factory import load_environment_config, use_environment_variables


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="konan-env",
        description="Show the IDE-supplied settings the Kotlin/Native build plugin would use.",
    )
    parser.add_argument(
        "-P",
        dest="properties",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help=f"Project property, e.g. -P {USE_ENVIRONMENT_VARIABLES_PROPERTY}=true",
    )
    parser.add_argument("--env-file", help="Load variables from a dotenv file first")
    parser.add_argument("--json", action="store_true", help="Print the settings as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        properties = MappingProjectProperties.from_assignments(args.properties)
    except ValueError as e:
        parser.error(str(e))

    if args.env_file:
        load_env_file(args.env_file)

    try:
        settings = load_environment_config(properties)
    except InvalidConfigurationError as e:
        print(f"Error: {e} (got {e.value!r})", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(settings.as_dict(), indent=2))
        return 0

    enabled = use_environment_variables(properties)
    print(f"Environment variables: {'enabled' if enabled else 'disabled'}")
    print(f"Build output dir:      {settings.build_output_dir or '-'}")
    print(f"Debugging symbols:     {'yes' if settings.debug_symbols_enabled else 'no'}")
    print(f"Optimizations:         {'yes' if settings.optimizations_enabled else 'no'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

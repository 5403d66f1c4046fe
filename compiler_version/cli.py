"""
Command-line interface for the compiler version provider.

Prints the version of this compiler and whether it is a pre-release build.
"""

import argparse
import json
import sys
from functools import partial
from typing import List, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config import environment_override, load_config
from .descriptor import parse_version
from .errors import VersionProviderError
from .logging_config import setup_logging
from .provider import VersionProvider, default_provider, TEST_IS_PRE_RELEASE_ENV

console = Console()
# Logs stay off stdout so --json and --pre-release output remain parseable
log_console = Console(stderr=True)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='compiler-version',
        description='Show the compiler version and pre-release status'
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument('--pre-release', action='store_true', help='Print only "true" or "false" for the pre-release status')
    output.add_argument('--json', action='store_true', help='Print version details as JSON')

    parser.add_argument('--override-env-key', help=f'Environment variable used as pre-release override (default: {TEST_IS_PRE_RELEASE_ENV})')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'debug', 'info', 'warning', 'error'], help='Logging level (default: INFO)')

    return parser.parse_args(argv)


def build_provider(config) -> VersionProvider:
    """Return the provider to query, honouring a non-default override key."""
    if config.override_env_key == TEST_IS_PRE_RELEASE_ENV:
        return default_provider()
    return VersionProvider(override=partial(environment_override, config.override_env_key))


def version_details(provider: VersionProvider) -> dict:
    """
    Collect version details for display.

    Components are None when the version does not follow major.minor.patch.
    """
    version = provider.get_version()
    details = {
        'version': version,
        'pre_release': provider.is_pre_release(),
        'major': None,
        'minor': None,
        'patch': None,
        'qualifier': None,
    }
    try:
        descriptor = parse_version(version)
    except ValueError:
        logger.debug(f"Version {version} does not follow major.minor.patch")
    else:
        details.update(
            major=descriptor.major,
            minor=descriptor.minor,
            patch=descriptor.patch,
            qualifier=descriptor.qualifier,
        )
    return details


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the compiler-version command."""
    setup_logging(console=log_console)

    args = parse_arguments(argv)

    # CLI args take precedence over env vars
    config = load_config(args)
    if config is None:
        return 1
    setup_logging(config.log_level, console=log_console)

    provider = build_provider(config)
    try:
        details = version_details(provider)
    except VersionProviderError as e:
        logger.error(f'❌ {e}')
        return 1

    if args.pre_release:
        console.print('true' if details['pre_release'] else 'false')
    elif args.json:
        console.print_json(json.dumps(details))
    else:
        status = '[yellow]pre-release[/yellow]' if details['pre_release'] else '[green]release[/green]'
        console.print(f"[bold]{escape(details['version'])}[/bold] ({status})")
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Configuration management for the compiler version provider.

Handles the test-only pre-release override channel and the small runtime
configuration used by the command line tool. Only the command line tool
reads .env files; importing the library never touches them.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import find_dotenv, load_dotenv
from loguru import logger

# Test-only channel for forcing the pre-release answer
TEST_IS_PRE_RELEASE_ENV = 'COMPILER_TEST_IS_PRE_RELEASE'

VALID_LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def parse_override(value: Optional[str]) -> Optional[bool]:
    """
    Interpret a raw override value.

    Only "true" and "false" are recognised (case-insensitive, no
    surrounding whitespace). Anything else, including None, means no
    override.

    Args:
        value: Raw value read from the override channel

    Returns:
        The override as a bool, or None when absent or unrecognised
    """
    if value is None:
        return None
    normalized = value.lower()
    if normalized == 'true':
        return True
    if normalized == 'false':
        return False
    return None


def environment_override(env_key: str = TEST_IS_PRE_RELEASE_ENV) -> Optional[str]:
    """Read the raw pre-release override from the process environment."""
    return os.environ.get(env_key)


def get_config_value(cli_args, field_name: str, env_key: str, default: str = '') -> str:
    """
    Get a string setting with precedence: CLI args > env vars > defaults.

    Args:
        cli_args: CLI arguments object or None
        field_name: Name of the CLI argument field
        env_key: Environment variable key
        default: Value used when neither CLI nor env var is set

    Returns:
        The configuration value
    """
    cli_value = getattr(cli_args, field_name, None) if cli_args else None
    if cli_value is not None:
        return cli_value
    return os.environ.get(env_key) or default


@dataclass
class Config:
    """Runtime settings for the compiler-version command."""

    log_level: str
    override_env_key: str = TEST_IS_PRE_RELEASE_ENV


def load_config(cli_args=None) -> Optional[Config]:
    """
    Load and validate configuration from CLI arguments and environment variables.

    Loads a .env file found from the working directory first; variables
    already present in the environment win.

    Args:
        cli_args: Parsed command-line arguments, or None

    Returns:
        Config object, or None if validation failed
    """
    load_dotenv(find_dotenv(usecwd=True))

    log_level = get_config_value(cli_args, 'log_level', 'LOG_LEVEL', 'INFO').upper()
    override_env_key = get_config_value(
        cli_args, 'override_env_key', 'COMPILER_OVERRIDE_ENV_KEY', TEST_IS_PRE_RELEASE_ENV
    )

    validation_errors = []
    if log_level not in VALID_LOG_LEVELS:
        validation_errors.append(f'LOG_LEVEL must be one of {", ".join(VALID_LOG_LEVELS)} (got: {log_level})')
    if not override_env_key.strip():
        validation_errors.append('COMPILER_OVERRIDE_ENV_KEY must not be empty')

    if validation_errors:
        for error in validation_errors:
            logger.error(f'❌ {error}')
        return None

    return Config(log_level=log_level, override_env_key=override_env_key.strip())

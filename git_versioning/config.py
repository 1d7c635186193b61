"""
Configuration management for git-versioning.

Handles environment variable loading, validation, and provides a centralized
configuration object for the CLI.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv
from loguru import logger

from .versioning import DEFAULT_ABBREV

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# git accepts --abbrev values from 4 up to a full sha
MIN_ABBREV = 4
MAX_ABBREV = 40


def get_config_value(cli_args, field_name: str, env_key: str, default, value_type: type = str):
    """
    Get configuration value with proper precedence: CLI args > env vars > defaults.

    Args:
        cli_args: CLI arguments object or None
        field_name: Name of the CLI argument field
        env_key: Environment variable key
        default: Default value if neither CLI nor env var is set
        value_type: Type to convert the value to (str, int)

    Returns:
        The configuration value converted to the specified type
    """
    cli_value = getattr(cli_args, field_name, None) if cli_args else None
    if cli_value is not None:
        return cli_value

    env_value = os.environ.get(env_key, '').strip()
    if not env_value:
        return default

    try:
        return value_type(env_value)
    except (ValueError, TypeError):
        logger.debug(f'Ignoring invalid {env_key} value: {env_value}')
        return default


def get_config_value_str(cli_args, field_name: str, env_key: str, default: str = '') -> str:
    """Get string configuration value."""
    return get_config_value(cli_args, field_name, env_key, default, str)


def get_config_value_int(cli_args, field_name: str, env_key: str, default: int = 0) -> int:
    """Get integer configuration value."""
    return get_config_value(cli_args, field_name, env_key, default, int)


@dataclass
class Config:
    """Configuration object containing all application settings."""

    # Working tree to describe
    directory: str

    # git invocation
    git_command: str
    abbrev: int

    # Logging
    log_level: str


def load_config(cli_args=None) -> Config:
    """
    Load and validate configuration from CLI arguments and environment variables.
    CLI arguments take precedence over environment variables.

    Args:
        cli_args: Parsed CLI arguments or None

    Returns:
        Config: Validated configuration object, or None if validation failed
    """
    directory = get_config_value_str(cli_args, 'directory', 'VERSIONING_DIRECTORY', os.getcwd())
    git_command = get_config_value_str(cli_args, 'git', 'VERSIONING_GIT', 'git')
    abbrev = get_config_value_int(cli_args, 'abbrev', 'VERSIONING_ABBREV', DEFAULT_ABBREV)
    log_level = get_config_value_str(cli_args, 'log_level', 'LOG_LEVEL', 'INFO').upper()

    validation_errors = []

    if log_level not in VALID_LOG_LEVELS:
        validation_errors.append(f'LOG_LEVEL must be one of {VALID_LOG_LEVELS} (got: {log_level})')

    if abbrev < MIN_ABBREV or abbrev > MAX_ABBREV:
        validation_errors.append(f'VERSIONING_ABBREV must be between {MIN_ABBREV}-{MAX_ABBREV} (got: {abbrev})')

    if not git_command.strip():
        validation_errors.append('VERSIONING_GIT must not be empty')

    directory = os.path.abspath(os.path.expanduser(directory))
    if not os.path.isdir(directory):
        validation_errors.append(f'VERSIONING_DIRECTORY ({directory}) does not exist or is not a directory')

    if validation_errors:
        logger.error('❌ Configuration Error:')
        for i, error_msg in enumerate(validation_errors, 1):
            logger.error(f'   {i}. {error_msg}')
        return None

    config = Config(
        directory=directory,
        git_command=git_command,
        abbrev=abbrev,
        log_level=log_level
    )

    logger.debug(f'VERSIONING_DIRECTORY = {config.directory}')
    logger.debug(f'VERSIONING_GIT = {config.git_command}')
    logger.debug(f'VERSIONING_ABBREV = {config.abbrev}')
    logger.debug(f'LOG_LEVEL = {config.log_level}')

    return config

"""
Command-line interface for git-versioning.

Prints the version of the current git work tree, or the next
major/minor/patch release derived from it. Only the version goes to
stdout; diagnostics are logged to stderr.
"""

import sys
import argparse
from loguru import logger
from rich.console import Console

from .config import VALID_LOG_LEVELS, load_config
from .errors import (
    GitNotFound,
    NoSemverTag,
    NotAGitRepository,
    UnsupportedPlusElement,
    VersioningError,
)
from .logging_config import setup_logging
from .semver import VersionPart
from .versioning import current_version, next_version

# Logs share stderr so stdout stays machine-readable
console = Console(stderr=True)

HINTS = {
    GitNotFound: '💡 Install git or point --git / VERSIONING_GIT at the executable',
    NotAGitRepository: '💡 Run inside a git checkout or use -C to select one',
    NoSemverTag: '💡 Tag a commit with a semantic version, e.g. git tag v0.1.0',
    UnsupportedPlusElement: '💡 Remove the +build metadata from the tag',
}


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='git-versioning',
        description='Derive a semantic version from git tags'
    )

    parser.add_argument('--next', choices=[part.value for part in VersionPart],
                        help='Print the next major, minor or patch version instead of the current one')

    parser.add_argument('-C', '--directory', help='Directory of the git work tree (default: current directory)')
    parser.add_argument('--git', help='git executable name or path (default: git)')
    parser.add_argument('--abbrev', type=int, help='Length of the abbreviated commit sha (default: 8)')

    # Logging
    parser.add_argument('--log-level', choices=VALID_LOG_LEVELS + [level.lower() for level in VALID_LOG_LEVELS], help='Logging level (default: INFO)')

    return parser.parse_args(argv)


def resolve_version(config, part: str = None) -> str:
    """Compute the version to print for the given configuration."""
    version = current_version(config.directory, config.git_command, config.abbrev)
    if part:
        return next_version(version, part)
    return version


def report_error(error: VersioningError) -> None:
    """Log a versioning failure with a hint on how to fix it."""
    logger.error(f'❌ {error}')
    hint = HINTS.get(type(error))
    if hint:
        logger.error(hint)


def main(argv=None) -> None:
    """Main entry point for the application."""
    setup_logging(console=console)

    args = parse_arguments(argv)

    if args.log_level:
        setup_logging(args.log_level.upper(), console=console)

    config = load_config(args)
    if config is None:
        sys.exit(1)

    setup_logging(config.log_level, console=console)

    try:
        version = resolve_version(config, args.next)
    except VersioningError as e:
        report_error(e)
        sys.exit(1)

    print(version)


if __name__ == '__main__':
    main()

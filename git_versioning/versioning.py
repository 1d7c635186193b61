"""
Version derivation from git tags.

Behavior:
- Tagged commit with a clean tree (e.g. v1.0.2) -> "1.0.2"
- Commits after the tag -> "1.0.2-3.g0123abcd"
- Prerelease tags keep their identifiers -> "2.4.0-alpha.suse.3.g0123abcd"
- Uncommitted changes to tracked files append "-dirty"
"""

import os
from typing import Optional
from loguru import logger

from . import git
from .errors import NoSemverTag, NotAGitRepository
from .semver import SemanticVersion, parse_tag, parse_version

DEFAULT_ABBREV = 8


def describe_version(work_dir: Optional[str] = None, git_command: str = 'git',
                     abbrev: int = DEFAULT_ABBREV) -> SemanticVersion:
    """
    Build a SemanticVersion from the git state of ``work_dir``.

    Args:
        work_dir: Directory to evaluate (default: current working directory)
        git_command: git executable name or path
        abbrev: Length of the abbreviated commit sha

    Returns:
        SemanticVersion: Version of the working tree

    Raises:
        GitNotFound: If git is not available
        NotAGitRepository: If work_dir is not inside a git work tree
        NoSemverTag: If there is no tag or the nearest tag is not semver
        UnsupportedPlusElement: If the nearest tag has a "+" element
    """
    work_dir = work_dir or os.getcwd()
    git_path = git.find_git(git_command)

    if not os.path.isdir(work_dir) or not git.is_inside_work_tree(git_path, work_dir):
        raise NotAGitRepository(work_dir)

    output = git.describe(git_path, work_dir, abbrev)
    if not output:
        logger.debug(f"No tag reachable from HEAD in {work_dir}")
        raise NoSemverTag()

    try:
        described = git.parse_describe(output)
    except ValueError as e:
        logger.debug(f"Describe output parsing error: {e}")
        raise NoSemverTag() from e

    logger.debug(
        f"Nearest tag: {described.tag}, commits since tag: {described.commits_since_tag}, "
        f"sha: {described.short_sha}, dirty: {described.dirty}"
    )

    base = parse_tag(described.tag)
    return SemanticVersion(
        major=base.major,
        minor=base.minor,
        patch=base.patch,
        prerelease=base.prerelease,
        dirty=described.dirty,
        commits_since_tag=described.commits_since_tag,
        short_sha=described.short_sha
    )


def current_version(work_dir: Optional[str] = None, git_command: str = 'git',
                    abbrev: int = DEFAULT_ABBREV) -> str:
    """
    Get the current version string of ``work_dir``.

    See describe_version() for arguments and errors.
    """
    version = describe_version(work_dir, git_command, abbrev).format()
    logger.debug(f"Current version: {version}")
    return version


def next_version(version: str, part) -> str:
    """
    Compute the next release version.

    Args:
        version: Version string, e.g. "10.200.5" or "1.0.2-1.g0123abcd-dirty"
        part: "major", "minor" or "patch" (or a VersionPart)

    Returns:
        str: Bumped "major.minor.patch" string

    Raises:
        InvalidVersionString: If version cannot be parsed
        ValueError: If part is not a known version part
    """
    bumped = parse_version(version).bump(part)
    logger.debug(f"Next version: {version} -> {bumped.core}")
    return bumped.core

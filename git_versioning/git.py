"""
Thin wrapper around the git executable.

Only the few read-only commands needed to describe the working tree
are exposed. Every call is a blocking subprocess.
"""

import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional
from loguru import logger

from .errors import GitNotFound

# <tag>-<count>-g<sha>[-dirty], as printed by `git describe --long --dirty`.
# Anchored on the right so tags that contain "-" are kept intact.
DESCRIBE_PATTERN = re.compile(
    r'^(?P<tag>.+)-(?P<count>[0-9]+)-g(?P<sha>[0-9a-f]+)(?P<dirty>-dirty)?$'
)


@dataclass(frozen=True)
class DescribeResult:
    """Fields of a `git describe --long --dirty` line."""
    tag: str
    commits_since_tag: int
    short_sha: str
    dirty: bool


def find_git(command: str = 'git') -> str:
    """
    Locate the git executable.

    Args:
        command: Executable name looked up on PATH, or a path to it

    Returns:
        str: Absolute path to the executable

    Raises:
        GitNotFound: If no executable can be found
    """
    git_path = shutil.which(command)
    if not git_path:
        raise GitNotFound(command)
    logger.debug(f"Using git executable: {git_path}")
    return git_path


def run_git(git_path: str, args: List[str], cwd: Optional[str] = None) -> subprocess.CompletedProcess:
    """Run a git command and capture its text output."""
    cmd = [git_path] + list(args)
    logger.debug(f"Running: {' '.join(cmd)} (cwd={cwd or '.'})")
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        encoding='utf-8',
        errors='replace',
        cwd=cwd
    )


def is_inside_work_tree(git_path: str, cwd: Optional[str] = None) -> bool:
    """Check whether ``cwd`` is inside a git work tree."""
    result = run_git(git_path, ['rev-parse', '--is-inside-work-tree'], cwd)
    if result.returncode != 0:
        logger.debug(f"git rev-parse failed: {result.stderr.strip()}")
        return False
    return result.stdout.strip() == 'true'


def describe(git_path: str, cwd: Optional[str] = None, abbrev: int = 8) -> Optional[str]:
    """
    Describe HEAD relative to the nearest tag.

    Untracked files do not mark the tree as dirty; staged and unstaged
    changes to tracked files do.

    Returns:
        str: Raw describe output, or None if no tag (or no commit) exists
    """
    result = run_git(
        git_path,
        ['describe', '--tags', '--long', '--dirty', f'--abbrev={abbrev}'],
        cwd
    )
    if result.returncode != 0:
        logger.debug(f"git describe failed: {result.stderr.strip()}")
        return None

    output = result.stdout.strip()
    return output or None


def parse_describe(output: str) -> DescribeResult:
    """
    Split `git describe --long --dirty` output into its fields.

    Raises:
        ValueError: If the output does not have the long format
    """
    match = DESCRIBE_PATTERN.match(output.strip())
    if not match:
        raise ValueError(f"Unexpected git describe output: {output}")

    return DescribeResult(
        tag=match.group('tag'),
        commits_since_tag=int(match.group('count')),
        short_sha=match.group('sha'),
        dirty=match.group('dirty') is not None
    )

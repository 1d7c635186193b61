"""
git-versioning

Derives a semantic version from `git describe` output and computes the
next major, minor or patch release.
"""

from ._version import __version__
from .errors import (
    GitNotFound,
    InvalidVersionString,
    NoSemverTag,
    NotAGitRepository,
    UnsupportedPlusElement,
    VersioningError,
)
from .semver import SemanticVersion, VersionPart
from .versioning import current_version, describe_version, next_version

__description__ = "Derive semantic versions from git tags"

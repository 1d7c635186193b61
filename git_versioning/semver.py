"""
Semantic version model.

Parses git tags and formatted version strings into a structured
SemanticVersion, renders it back to text and computes bumped versions.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from .errors import InvalidVersionString, NoSemverTag, UnsupportedPlusElement

_NUMBER = r'(?:0|[1-9][0-9]*)'
_IDENTIFIER = r'(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)'

# Strict semver.org grammar without build metadata, optional leading "v"
TAG_PATTERN = re.compile(
    rf'^v?(?P<major>{_NUMBER})\.(?P<minor>{_NUMBER})\.(?P<patch>{_NUMBER})'
    rf'(?:-(?P<prerelease>{_IDENTIFIER}(?:\.{_IDENTIFIER})*))?$'
)

# Formatted versions may carry distance, sha and dirty markers after the core
VERSION_PATTERN = re.compile(
    rf'^v?(?P<major>{_NUMBER})\.(?P<minor>{_NUMBER})\.(?P<patch>{_NUMBER})'
    r'(?:-(?P<tail>[0-9A-Za-z.-]+))?$'
)

DIRTY_SUFFIX = 'dirty'


class VersionPart(Enum):
    """Field of a version that can be bumped."""
    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'


@dataclass(frozen=True)
class SemanticVersion:
    """A version derived from git state."""

    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...] = ()
    dirty: bool = False
    commits_since_tag: int = 0
    short_sha: str = ''

    def __post_init__(self):
        for name in ('major', 'minor', 'patch', 'commits_since_tag'):
            if getattr(self, name) < 0:
                raise ValueError(f'{name} must be non-negative (got: {getattr(self, name)})')
        if any('+' in identifier for identifier in self.prerelease):
            raise UnsupportedPlusElement('.'.join(self.prerelease))

    @property
    def core(self) -> str:
        """The bare ``major.minor.patch`` string."""
        return f'{self.major}.{self.minor}.{self.patch}'

    @property
    def identifiers(self) -> Tuple[str, ...]:
        """Tag prerelease identifiers followed by the commit distance and sha, if any."""
        if self.commits_since_tag > 0:
            return self.prerelease + (str(self.commits_since_tag), f'g{self.short_sha}')
        return self.prerelease

    def format(self) -> str:
        """
        Render the version as a string.

        Layout is ``<core>[-<identifiers>][-dirty]``, e.g. ``1.0.2``,
        ``1.0.2-1.g0123abcd`` or ``2.4.0-alpha.suse.1.g0123abcd-dirty``.
        """
        version = self.core
        if self.identifiers:
            version += '-' + '.'.join(self.identifiers)
        if self.dirty:
            version += f'-{DIRTY_SUFFIX}'
        return version

    def __str__(self) -> str:
        return self.format()

    def bump(self, part) -> 'SemanticVersion':
        """
        Return the next release version for ``part``.

        Lower-significance fields reset to 0; prerelease, distance and
        dirty markers are dropped.
        """
        part = VersionPart(part)
        if part is VersionPart.MAJOR:
            major, minor, patch = self.major + 1, 0, 0
        elif part is VersionPart.MINOR:
            major, minor, patch = self.major, self.minor + 1, 0
        else:
            major, minor, patch = self.major, self.minor, self.patch + 1
        return replace(
            self, major=major, minor=minor, patch=patch,
            prerelease=(), dirty=False, commits_since_tag=0, short_sha=''
        )


def parse_tag(tag: str) -> SemanticVersion:
    """
    Parse a git tag such as ``v1.0.2`` or ``2.4.0-alpha.suse``.

    Raises:
        UnsupportedPlusElement: If the tag contains a ``+``
        NoSemverTag: If the tag is not a semantic version
    """
    if '+' in tag:
        raise UnsupportedPlusElement(tag)

    match = TAG_PATTERN.match(tag)
    if not match:
        raise NoSemverTag(tag)

    prerelease = match.group('prerelease')
    return SemanticVersion(
        major=int(match.group('major')),
        minor=int(match.group('minor')),
        patch=int(match.group('patch')),
        prerelease=tuple(prerelease.split('.')) if prerelease else (),
    )


def parse_version(version: str) -> SemanticVersion:
    """
    Parse a formatted version string like ``1.0.2-1.g0123abcd-dirty``.

    Only the core and the dirty marker are kept; everything else after
    the first ``-`` is ignored.

    Raises:
        InvalidVersionString: If the string does not start with a valid core
    """
    match = VERSION_PATTERN.match(version.strip())
    if not match:
        raise InvalidVersionString(version)

    tail = match.group('tail') or ''
    return SemanticVersion(
        major=int(match.group('major')),
        minor=int(match.group('minor')),
        patch=int(match.group('patch')),
        dirty=tail == DIRTY_SUFFIX or tail.endswith(f'-{DIRTY_SUFFIX}'),
    )

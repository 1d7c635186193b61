"""
Exceptions raised while deriving a version from git.

Library functions raise these; the CLI is the only place that catches
them and turns them into an error message and a non-zero exit code.
"""


class VersioningError(Exception):
    """Base class for every failure the version deriver reports."""
    pass


class GitNotFound(VersioningError):
    """The git executable is not available."""

    def __init__(self, command: str = 'git'):
        self.command = command
        super().__init__(f"The command `{command}` does not exist!")


class NotAGitRepository(VersioningError):
    """The working directory is not inside a git work tree."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"The current directory `{directory}` is not a git work tree!")


class NoSemverTag(VersioningError):
    """
    No tag could be found, or the nearest tag is not a semantic version.

    Both cases share one message.
    """

    def __init__(self, tag: str = None):
        self.tag = tag
        super().__init__("A git tag with a semantic version is required!")


class UnsupportedPlusElement(VersioningError):
    """The tag carries `+build` metadata, which is not supported."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__("A git tag version including plus elements is not supported!")


class InvalidVersionString(VersioningError, ValueError):
    """A version string handed to the bump logic could not be parsed."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid version string: {version!r}")

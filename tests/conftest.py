"""
Pytest configuration and shared fixtures for test suite.

Provides throwaway git repositories with an isolated git configuration,
a mock Config object and a loguru sink for asserting log output.
"""

import os
import subprocess
import pytest
from unittest.mock import MagicMock
from loguru import logger


class GitRepo:
    """Helper driving a real git repository inside a temporary directory."""

    def __init__(self, path):
        self.path = str(path)

    def git(self, *args) -> str:
        result = subprocess.run(
            ['git'] + list(args),
            cwd=self.path,
            capture_output=True,
            text=True,
            check=True
        )
        return result.stdout.strip()

    def init(self) -> 'GitRepo':
        self.git('init', '--quiet')
        return self

    def write(self, file_name: str, content: str = 'Dummy content') -> None:
        with open(os.path.join(self.path, file_name), 'w', encoding='utf-8') as f:
            f.write(content)

    def commit(self, file_name: str) -> None:
        """Create (or overwrite) a file and commit it."""
        self.write(file_name)
        self.git('add', file_name)
        self.git('commit', '--quiet', '--no-gpg-sign', '--message', 'Dummy', file_name)

    def tag(self, tag: str) -> None:
        self.git('tag', tag)

    def commit_and_tag(self, tag: str) -> None:
        self.commit(tag)
        self.tag(tag)

    def stage_change(self, file_name: str) -> None:
        """Leave an uncommitted change to a tracked (staged) file."""
        self.write(file_name)
        self.git('add', file_name)


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """Isolate git from the user's and system configuration."""
    global_config = tmp_path / 'gitconfig'
    global_config.write_text('')
    monkeypatch.setenv('GIT_CONFIG_GLOBAL', str(global_config))
    monkeypatch.setenv('GIT_CONFIG_NOSYSTEM', '1')
    monkeypatch.setenv('GIT_AUTHOR_NAME', 'Test Author')
    monkeypatch.setenv('GIT_AUTHOR_EMAIL', 'author@example.com')
    monkeypatch.setenv('GIT_COMMITTER_NAME', 'Test Committer')
    monkeypatch.setenv('GIT_COMMITTER_EMAIL', 'committer@example.com')
    # Stop git from discovering a repository above the test directory
    monkeypatch.setenv('GIT_CEILING_DIRECTORIES', str(tmp_path))
    return tmp_path


@pytest.fixture
def work_dir(git_env):
    """Empty directory that is not (yet) a git work tree."""
    path = git_env / 'work'
    path.mkdir()
    return path


@pytest.fixture
def git_repo(work_dir):
    """Initialized git repository without commits."""
    return GitRepo(work_dir).init()


@pytest.fixture
def mock_config(tmp_path):
    """Create a mock Config object with sensible defaults."""
    config = MagicMock()
    config.directory = str(tmp_path)
    config.git_command = 'git'
    config.abbrev = 8
    config.log_level = 'INFO'
    return config


@pytest.fixture
def log_messages():
    """Collect messages logged through loguru while the test runs."""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record['message']), level='DEBUG')
    yield messages
    logger.remove(handler_id)

import io
import shutil
import subprocess

import pytest
import logging


class RecordingCommitter:
    """VCSCommitter fake that records every call instead of running git.

    ``fail_on`` makes the n-th call to the named step raise, e.g.
    ``{"commit": 2}`` fails the second commit.
    """

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = dict(fail_on or {})
        self._counts = {}

    def _record(self, step, *args):
        self._counts[step] = self._counts.get(step, 0) + 1
        if self.fail_on.get(step) == self._counts[step]:
            from vrs.versioning.exceptions import CommandFailureError

            raise CommandFailureError(["git", step, *args], 1)
        self.calls.append((step, *args))

    def stage(self, path):
        self._record("stage", path)

    def commit(self, message):
        self._record("commit", message)

    def tag(self, version):
        self._record("tag", version)

    def push(self):
        self._record("push")

    def push_tags(self):
        self._record("push_tags")


@pytest.fixture
def committer():
    """A recording committer that never fails."""
    return RecordingCommitter()


@pytest.fixture
def failing_committer():
    """Factory for recording committers that fail on a given call."""

    def _make(**fail_on):
        return RecordingCommitter(fail_on)

    return _make


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("vrs")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


# git fixtures


def _git(repo_path, *args):
    return subprocess.run(
        ["git", *args],
        cwd=repo_path,
        check=True,
        capture_output=True,
        text=True,
    )


@pytest.fixture
def git():
    """Run a git command in a directory and return the completed process."""
    return _git


@pytest.fixture
def git_repo(tmp_path):
    """An empty git repository with a committer identity configured."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    _git(repo_path, "init", "-q")
    _git(repo_path, "config", "user.name", "vrs tests")
    _git(repo_path, "config", "user.email", "vrs-tests@example.com")
    _git(repo_path, "config", "commit.gpgsign", "false")
    _git(repo_path, "config", "tag.gpgsign", "false")
    return repo_path

"""
Git backend for recording version changes.

Each step shells out to the ``git`` binary through GitPython's command
wrapper, with the working directory pinned to the project's base directory.
"""

import logging
from pathlib import Path
from typing import Union

from git import Git
from git.exc import CommandError

from vrs.constants import CONFIG_FILE_NAME, TAG_PREFIX
from vrs.core.interfaces import VCSCommitter

from .exceptions import CommandFailureError
from .version import tag_name

logger = logging.getLogger(__name__)


class GitCommitter:
    """
    Runs ``git add``, ``git commit``, ``git tag`` and ``git push`` in a directory.

    Any nonzero exit status, or a git binary that cannot be started, raises
    CommandFailureError. Nothing is retried or undone.
    """

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)
        self._git = Git(str(self.base_dir))

    def _run(self, *args: str) -> None:
        command = ["git", *args]
        logger.debug(f"Running {' '.join(command)} in {self.base_dir}")
        try:
            self._git.execute(command)
        except CommandError as e:
            status = e.status if isinstance(e.status, int) else None
            if e.stderr:
                logger.debug(e.stderr.strip())
            raise CommandFailureError(command, status) from e

    def stage(self, path: str) -> None:
        self._run("add", str(path))

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def tag(self, version: str) -> None:
        self._run("tag", tag_name(version, TAG_PREFIX))

    def push(self) -> None:
        self._run("push")

    def push_tags(self) -> None:
        self._run("push", "--tags")


def commit_config(
    committer: VCSCommitter, message: str, version: str, push: bool
) -> None:
    """
    Record a freshly written vrs.yml: stage, commit, tag and optionally push.

    Args:
        committer: Version-control backend
        message: Commit message
        version: Version to tag, without the ``v`` prefix
        push: Also push commits and then tags
    """
    committer.stage(CONFIG_FILE_NAME)
    committer.commit(message)
    committer.tag(version)
    if push:
        committer.push()
        committer.push_tags()


def commit_sync_file(committer: VCSCommitter, path: str, message: str) -> None:
    """Stage one synced file and commit it on its own."""
    committer.stage(path)
    committer.commit(message)

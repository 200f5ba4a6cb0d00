"""
Entry operations: init, bump and read the current version.

Each operation loads a fresh copy of vrs.yml from disk, and none of them is
transactional. A bump persists the config, commits and tags it, and only then
rewrites and commits the sync targets one by one. If a later step fails, every
earlier step has already taken effect.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from vrs.constants import (
    BUMP_COMMIT_MESSAGE,
    INIT_COMMIT_MESSAGE,
    INITIAL_VERSION,
    SYNC_COMMIT_MESSAGE,
)
from vrs.core.interfaces import VCSCommitter
from vrs.model import SyncSpec, VersionConfig

from .git import GitCommitter, commit_config, commit_sync_file
from .store import load_config, save_config
from .substitution import rewrite_file
from .version import bump_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitOptions:
    basedir: Path
    git_commit: bool
    git_push: bool

    @classmethod
    def with_defaults(cls, **overrides) -> "InitOptions":
        """Options for the current working directory with git enabled."""
        values = {"basedir": Path(os.getcwd()), "git_commit": True, "git_push": True}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


@dataclass(frozen=True)
class BumpOptions:
    basedir: Path
    git_commit: bool
    git_push: bool
    active_profiles: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def with_defaults(cls, **overrides) -> "BumpOptions":
        """Options for the current working directory with git enabled and no profiles."""
        values = {
            "basedir": Path(os.getcwd()),
            "git_commit": True,
            "git_push": True,
            "active_profiles": (),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        values["active_profiles"] = tuple(values["active_profiles"])
        return cls(**values)


@dataclass(frozen=True)
class ReadCurrentOptions:
    basedir: Path
    git_commit: bool
    git_push: bool

    @classmethod
    def with_defaults(cls, **overrides) -> "ReadCurrentOptions":
        """Options for the current working directory with git enabled."""
        values = {"basedir": Path(os.getcwd()), "git_commit": True, "git_push": True}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def init(
    options: InitOptions, committer: Optional[VCSCommitter] = None
) -> VersionConfig:
    """
    Write a new vrs.yml at version 0.0.0 and record it.

    An existing vrs.yml is overwritten without warning.

    Args:
        options: Where to write and whether to commit/push
        committer: Version-control backend, defaults to git in options.basedir

    Returns:
        The written VersionConfig
    """
    config = VersionConfig(version=INITIAL_VERSION)
    path = save_config(options.basedir, config)
    logger.debug(f"Initialized {path}")

    if options.git_commit:
        committer = committer or GitCommitter(options.basedir)
        commit_config(committer, INIT_COMMIT_MESSAGE, config.version, options.git_push)

    return config


def read_current_version(options: ReadCurrentOptions) -> str:
    """Return the version stored in vrs.yml, unchanged."""
    return load_config(options.basedir).version


def _sync_files(
    spec: Optional[SyncSpec],
    options: BumpOptions,
    old_version: str,
    new_version: str,
    committer: Optional[VCSCommitter],
) -> None:
    if spec is None:
        return

    for sync_file in spec.files:
        path = Path(options.basedir) / sync_file.name
        count = rewrite_file(path, old_version, sync_file.pattern, new_version)
        logger.debug(f"Synced {sync_file.name} ({count} replacement(s))")

        if committer is not None:
            commit_sync_file(committer, sync_file.name, SYNC_COMMIT_MESSAGE)


def bump(options: BumpOptions, committer: Optional[VCSCommitter] = None) -> str:
    """
    Increment the minor version and propagate it to all sync targets.

    Steps, in order:
    1. Load vrs.yml and compute the new version
    2. Write vrs.yml
    3. If committing: commit it, tag ``v<new>`` and, if pushing, push commits
       and tags
    4. Rewrite the global sync files, then the sync files of every profile
       named in ``options.active_profiles``, committing each file separately

    Args:
        options: Where to bump, git flags and active profiles
        committer: Version-control backend, defaults to git in options.basedir

    Returns:
        The new version string

    Raises:
        ConfigNotFoundError: If there is no vrs.yml
        ConfigParseError: If vrs.yml or its version is malformed; nothing is written
        FileReadError: If a sync target cannot be read
        InvalidPatternError: If a sync pattern does not compile
        CommandFailureError: If a git step fails
    """
    config = load_config(options.basedir)
    old_version = config.version
    new_version = bump_version(old_version)
    logger.debug(f"Bumping {old_version} -> {new_version}")

    config.version = new_version
    save_config(options.basedir, config)

    if options.git_commit:
        committer = committer or GitCommitter(options.basedir)
        commit_config(committer, BUMP_COMMIT_MESSAGE, new_version, options.git_push)
    else:
        committer = None

    _sync_files(config.sync, options, old_version, new_version, committer)

    for profile in config.active_profiles(options.active_profiles):
        logger.debug(f"Syncing profile {profile.name}")
        _sync_files(profile.sync, options, old_version, new_version, committer)

    return new_version


"""
Versioning Module for vrs.

All logic that touches the tracked version lives here:

1. **Version arithmetic** (version.py):
   - Splitting a ``major.minor.patch`` string and incrementing its minor part

2. **Version document** (store.py):
   - Loading and persisting vrs.yml in a project's base directory

3. **Sync targets** (substitution.py):
   - Rewriting a file, either replacing the previous version literally or
     replacing every match of a regular expression

4. **Git integration** (git.py):
   - GitCommitter: stage/commit/tag/push through the git binary
   - Any backend following ``vrs.core.interfaces.VCSCommitter`` can be
     injected instead, e.g. a recording fake in tests

5. **Operations** (operations.py):
   - init, bump and read_current_version, the entry points used by the CLI

6. **Exception Hierarchy** (exceptions.py):
   - One exception type per failure kind, all deriving from VrsError

A bump is NOT transactional. vrs.yml is written, committed and tagged before
the sync targets are touched, and each sync target gets its own commit after
the tag. A failure part way leaves every earlier step in place.
"""

from .exceptions import (
    VrsError,
    ConfigNotFoundError,
    ReadError,
    WriteError,
    ConfigReadError,
    ConfigWriteError,
    FileReadError,
    FileWriteError,
    ConfigParseError,
    MalformedVersionError,
    InvalidPatternError,
    CommandFailureError,
)
from .git import GitCommitter
from .operations import (
    BumpOptions,
    InitOptions,
    ReadCurrentOptions,
    bump,
    init,
    read_current_version,
)
from .store import config_path, load_config, save_config
from .substitution import rewrite_file
from .version import VersionParts, bump_version, parse_version

__all__ = [
    # Operations
    "init",
    "bump",
    "read_current_version",
    "InitOptions",
    "BumpOptions",
    "ReadCurrentOptions",
    # Building blocks
    "GitCommitter",
    "config_path",
    "load_config",
    "save_config",
    "rewrite_file",
    "VersionParts",
    "bump_version",
    "parse_version",
    # Exceptions
    "VrsError",
    "ConfigNotFoundError",
    "ReadError",
    "WriteError",
    "ConfigReadError",
    "ConfigWriteError",
    "FileReadError",
    "FileWriteError",
    "ConfigParseError",
    "MalformedVersionError",
    "InvalidPatternError",
    "CommandFailureError",
]

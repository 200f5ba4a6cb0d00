"""Protocol interfaces for version-control backends.

Protocols that decouple the bump orchestration from the git binary.
"""

from typing import Protocol


class VCSCommitter(Protocol):
    """Minimal interface for recording changes in version control.

    Each method is one independent step; a failing step raises and leaves the
    steps already taken in place.
    """

    def stage(self, path: str) -> None:
        """Stage a single file, relative to the base directory."""
        ...

    def commit(self, message: str) -> None:
        """Commit everything currently staged."""
        ...

    def tag(self, version: str) -> None:
        """Tag the current commit as ``v<version>``."""
        ...

    def push(self) -> None:
        """Publish commits to the configured remote."""
        ...

    def push_tags(self) -> None:
        """Publish tags to the configured remote."""
        ...

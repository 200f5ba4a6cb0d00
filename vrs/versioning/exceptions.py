"""
Exception classes for the versioning module.

Every failure a bump, init or read can run into is one of these, so callers
can branch on the type instead of matching messages.
"""

from pathlib import Path
from typing import Optional, Sequence


class VrsError(Exception):
    """Base exception for all vrs errors."""

    pass


class ConfigNotFoundError(VrsError):
    """Raised when the base directory holds no version file."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)
        super().__init__(f"No vrs file found in {self.base_dir}")


class ReadError(VrsError):
    """Raised when a file cannot be read."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        if reason:
            super().__init__(f"Could not read {self.path}: {reason}")
        else:
            super().__init__(f"Could not read {self.path}")


class WriteError(VrsError):
    """Raised when a file cannot be written."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        if reason:
            super().__init__(f"Could not write {self.path}: {reason}")
        else:
            super().__init__(f"Could not write {self.path}")


class ConfigReadError(ReadError):
    """Raised when the version file exists but cannot be read."""

    pass


class ConfigWriteError(WriteError):
    """Raised when the version file cannot be written."""

    pass


class FileReadError(ReadError):
    """Raised when a sync target cannot be read."""

    pass


class FileWriteError(WriteError):
    """Raised when a sync target cannot be written back."""

    pass


class ConfigParseError(VrsError):
    """Raised when the version file is not a valid document."""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = Path(path) if path is not None else None
        self.reason = reason
        if self.path is not None:
            super().__init__(f"Failed to parse {self.path}: {reason}")
        else:
            super().__init__(f"Failed to parse version document: {reason}")


class MalformedVersionError(ConfigParseError):
    """Raised when a version string does not have a numeric minor component."""

    def __init__(self, version_string: str, expected_format: str = "x.<int>.z"):
        self.version_string = version_string
        self.expected_format = expected_format
        super().__init__(
            None,
            f"Invalid version format: '{version_string}'. "
            f"Expected format: {expected_format}",
        )


class InvalidPatternError(VrsError):
    """Raised when a sync pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        self.reason = reason
        message = f"Invalid sync pattern '{pattern}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CommandFailureError(VrsError):
    """Raised when a version-control command fails or cannot be started."""

    def __init__(self, command: Sequence[str], status: Optional[int] = None):
        self.command = list(command)
        self.status = status
        rendered = " ".join(self.command)
        if status is None:
            super().__init__(f"Command '{rendered}' could not be run")
        else:
            super().__init__(f"Command '{rendered}' failed with exit status {status}")

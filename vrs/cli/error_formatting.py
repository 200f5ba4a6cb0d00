"""Error formatting for CLI output."""

from vrs.versioning.exceptions import (
    CommandFailureError,
    ConfigNotFoundError,
    ConfigParseError,
    InvalidPatternError,
    MalformedVersionError,
    VrsError,
)


def format_error(error: VrsError) -> str:
    """Format a VrsError to present useful information to the user.

    Example output:
        Error: No vrs file found in /path/to/project
          hint: run `vrs init` to start tracking a version here
    """
    message_parts = [f"Error: {error}"]

    if isinstance(error, ConfigParseError) and error.path is not None:
        message_parts.append(f"  --> {error.path}")

    hint = _hint_for(error)
    if hint:
        message_parts.append(f"  hint: {hint}")

    return "\n".join(message_parts)


def _hint_for(error: VrsError) -> str:
    if isinstance(error, ConfigNotFoundError):
        return "run `vrs init` to start tracking a version here"
    if isinstance(error, MalformedVersionError):
        return "the middle component must be a non-negative integer, e.g. 1.4.0"
    if isinstance(error, InvalidPatternError):
        return "check the sync patterns in vrs.yml"
    if isinstance(error, CommandFailureError):
        return (
            "earlier steps were already applied; check `git status` and "
            "`git log` before running again"
        )
    return ""

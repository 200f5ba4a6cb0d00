"""Rewrite the version string inside a sync target."""

import logging
import re
from pathlib import Path
from typing import Tuple, Union

from vrs.io.files import read_text, write_text

from .exceptions import FileReadError, FileWriteError, InvalidPatternError

logger = logging.getLogger(__name__)


def substitute_literal(content: str, old_version: str, new_version: str) -> Tuple[str, int]:
    """Replace every occurrence of ``old_version`` in ``content``."""
    count = content.count(old_version)
    return content.replace(old_version, new_version), count


def substitute_pattern(content: str, pattern: str, new_version: str) -> Tuple[str, int]:
    """
    Replace every match of ``pattern`` in ``content`` with ``new_version``.

    ``new_version`` is used as the replacement template, so group references
    such as ``\\1`` in it are expanded by ``re``.

    Raises:
        InvalidPatternError: If the pattern or the replacement template is invalid
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e

    try:
        return regex.subn(new_version, content)
    except re.error as e:
        raise InvalidPatternError(pattern, f"bad replacement '{new_version}': {e}") from e


def rewrite_file(
    file_path: Union[str, Path],
    old_version: str,
    pattern: str,
    new_version: str,
) -> int:
    """
    Rewrite the version inside one file.

    A non-empty ``pattern`` selects pattern mode and ``old_version`` is ignored;
    otherwise every literal occurrence of ``old_version`` is replaced. The file
    is always written back, even when nothing matched.

    Args:
        file_path: File to rewrite
        old_version: Version string to replace in literal mode
        pattern: Regular expression to replace in pattern mode, or ""
        new_version: Replacement

    Returns:
        Number of replacements made

    Raises:
        FileReadError: If the file cannot be read
        InvalidPatternError: If the pattern does not compile
        FileWriteError: If the file cannot be written back
    """
    path = Path(file_path)
    try:
        content = read_text(path)
    except OSError as e:
        raise FileReadError(path, str(e)) from e

    if pattern:
        updated, count = substitute_pattern(content, pattern, new_version)
    else:
        updated, count = substitute_literal(content, old_version, new_version)

    if count == 0:
        logger.debug(f"No version found to replace in {path}")

    try:
        write_text(path, updated)
    except OSError as e:
        raise FileWriteError(path, str(e)) from e

    return count

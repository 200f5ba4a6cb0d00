"""Functions to read and write whole files"""

import os
from pathlib import Path

from vrs.constants import FILE_MODE


def read_text(path: Path) -> str:
    """Read the full content of a file without newline translation."""
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def write_text(path: Path, content: str, mode: int = FILE_MODE) -> None:
    """
    Write the full content of a file, truncating what was there.

    The permission bits only apply when the file is created; an existing file
    keeps its mode. The write is not atomic.
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with open(
        fd, "w", encoding="utf-8", errors="surrogateescape", newline=""
    ) as fh:
        fh.write(content)

from pathlib import Path
from typing import Iterable, Tuple

import click

from vrs.config import git_defaults


def parse_profiles(profiles: Iterable[str]) -> Tuple[str, ...]:
    """
    Flatten repeated --profile values into unique profile names.

    Each value may itself hold several names separated by commas or spaces,
    so ``-p a -p b,c`` and ``VRS_PROFILES="a b c"`` both give ('a', 'b', 'c').
    Order of first appearance is kept.
    """
    names = []
    for entry in profiles:
        for name in entry.replace(",", " ").split():
            if name not in names:
                names.append(name)
    return tuple(names)


def _default_commit() -> bool:
    return git_defaults()[0]


def _default_push() -> bool:
    return git_defaults()[1]


basedir_option = click.option(
    "--basedir",
    "-C",
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Project directory holding vrs.yml. Defaults to the current directory.",
    envvar="VRS_BASEDIR",
)

commit_option = click.option(
    "--commit/--no-commit",
    "git_commit",
    default=_default_commit,
    help="Commit and tag the change with git.",
    envvar="VRS_GIT_COMMIT",
)

push_option = click.option(
    "--push/--no-push",
    "git_push",
    default=_default_push,
    help="Push commits and tags after committing.",
    envvar="VRS_GIT_PUSH",
)

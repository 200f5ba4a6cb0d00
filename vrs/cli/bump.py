"""cli command to bump the version and sync it into other files"""

import click

from vrs.cli.error_formatting import format_error
from vrs.cli.utils.args import (
    basedir_option,
    commit_option,
    parse_profiles,
    push_option,
)
from vrs.cli.utils.logging import logger
from vrs.versioning import BumpOptions, VrsError, bump


@click.command(name="bump")
@basedir_option
@commit_option
@push_option
@click.option(
    "--profile",
    "-p",
    "profiles",
    multiple=True,
    help="Also sync the files of this profile. Can be repeated.",
    envvar="VRS_PROFILES",
)
@click.pass_context
def bump_command(ctx, basedir, git_commit: bool, git_push: bool, profiles):
    """Increment the minor version and update all sync targets.

    vrs.yml is written, committed and tagged first. Each sync target is then
    rewritten and committed on its own.
    """
    options = BumpOptions.with_defaults(
        basedir=basedir,
        git_commit=git_commit,
        git_push=git_push,
        active_profiles=parse_profiles(profiles),
    )
    if options.active_profiles:
        logger.debug(f"Active profiles: {', '.join(options.active_profiles)}")

    try:
        new_version = bump(options)
    except VrsError as e:
        logger.error(format_error(e))
        ctx.exit(1)

    click.echo(new_version)

"""cli command to start tracking a version"""

import click

from vrs.cli.error_formatting import format_error
from vrs.cli.utils.args import basedir_option, commit_option, push_option
from vrs.cli.utils.logging import logger
from vrs.constants import CONFIG_FILE_NAME
from vrs.versioning import InitOptions, VrsError, init


@click.command(name="init")
@basedir_option
@commit_option
@push_option
@click.pass_context
def init_command(ctx, basedir, git_commit: bool, git_push: bool):
    """Create vrs.yml at version 0.0.0.

    An existing vrs.yml is overwritten and its version reset.
    """
    options = InitOptions.with_defaults(
        basedir=basedir, git_commit=git_commit, git_push=git_push
    )
    logger.debug(f"Initializing {CONFIG_FILE_NAME} in {options.basedir}")

    try:
        config = init(options)
    except VrsError as e:
        logger.error(format_error(e))
        ctx.exit(1)

    click.echo(f"Initialized {CONFIG_FILE_NAME} at version {config.version}")

"""cli command to print the tracked version"""

import click

from vrs.cli.error_formatting import format_error
from vrs.cli.utils.args import basedir_option
from vrs.cli.utils.logging import logger
from vrs.versioning import ReadCurrentOptions, VrsError, read_current_version


@click.command(name="current")
@basedir_option
@click.pass_context
def current_command(ctx, basedir):
    """Print the current version from vrs.yml."""
    options = ReadCurrentOptions.with_defaults(basedir=basedir)

    try:
        version = read_current_version(options)
    except VrsError as e:
        logger.error(format_error(e))
        ctx.exit(1)

    click.echo(version)

"""vrs CLI"""

import click

from vrs import __version__
from vrs.cli.bump import bump_command
from vrs.cli.current import current_command
from vrs.cli.init import init_command

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="vrs")
@click.pass_context
def cli(ctx):
    """
    Track a project version in vrs.yml and keep other files in sync with it.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(init_command))
cli.add_command(add_debug_option(bump_command))
cli.add_command(add_debug_option(current_command))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})

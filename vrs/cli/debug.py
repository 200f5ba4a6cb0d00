import click

from .utils.logging import configure_logging


def add_debug_option(cmd: click.Command) -> click.Command:
    """Give a command or group a ``--debug/--no-debug`` flag."""
    if any(param.name == "debug" for param in cmd.params):
        return cmd

    cmd.params.insert(
        0,
        click.Option(
            ["--debug/--no-debug"],
            is_eager=True,
            expose_value=False,
            callback=_set_debug,
            help="Enable debug mode",
        ),
    )
    return cmd


def _set_debug(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    """Store the debug flag on the root context and reconfigure logging.

    ``vrs --debug bump`` and ``vrs bump --debug`` both turn debug on; a
    subcommand's default ``--no-debug`` does not turn it back off.
    """
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)

    if value or ctx is root_ctx:
        root_ctx.obj["DEBUG"] = value
    debug = root_ctx.obj.get("DEBUG", False)

    configure_logging(debug)
    return debug

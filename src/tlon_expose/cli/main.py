"""tlon-expose CLI main entry point with global options."""

import logging

import click

from ..context import ExposeContext


@click.group()
@click.option("--url", "-u", help="Ship URL, e.g. http://localhost:8080 (overrides $SHIP_URL)")
@click.option("--ship", "-s", help="Ship name, e.g. zod (overrides $SHIP_NAME)")
@click.option("--code", "-c", help="Ship access code (overrides $SHIP_CODE)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, url, ship, code, verbose):
    """Manage which posts your ship exposes on the clearweb.

    Settings are also read from SHIP_URL, SHIP_NAME and SHIP_CODE, either
    in the environment or in a .env file in the current directory.
    """
    ctx.ensure_object(ExposeContext)
    ctx.obj.url = url
    ctx.obj.ship = ship
    ctx.obj.code = code

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands at module level so tests can import cli with commands attached
from .commands.check import check
from .commands.eager import eager
from .commands.expand import expand, url
from .commands.list import list_cmd
from .commands.show import hide, show

cli.add_command(expand)
cli.add_command(url)
cli.add_command(list_cmd)
cli.add_command(check)
cli.add_command(show)
cli.add_command(hide)
cli.add_command(eager)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

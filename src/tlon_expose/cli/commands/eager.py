"""Eager command - toggle pre-fetching of pinned posts."""

import click

from ...api import set_expose_eager_mode
from ...context import pass_context
from ..helpers import CLI_ERRORS, connect, fail


@click.command()
@click.argument("mode", type=click.Choice(["on", "off"]))
@pass_context
def eager(ctx, mode):
    """Turn eager mode on or off.

    In eager mode the agent pre-fetches pinned posts from other ships.
    """
    try:
        set_expose_eager_mode(mode == "on", transport=connect(ctx))
    except CLI_ERRORS as e:
        fail(e)

    click.echo(f"Eager mode {mode}")

"""List command - print every exposed post."""

import click

from ...api import list_exposed_content
from ...context import pass_context
from ..helpers import CLI_ERRORS, connect, fail


@click.command(name="list")
@pass_context
def list_cmd(ctx):
    """List the cite paths of all exposed posts."""
    try:
        cites = list_exposed_content(transport=connect(ctx))
    except CLI_ERRORS as e:
        fail(e)

    if not cites:
        click.echo("No exposed content.")
        return

    for cite in cites:
        click.echo(cite)

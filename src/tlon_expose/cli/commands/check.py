"""Check command - report whether a post is exposed."""

import click

from ...api import check_post_exposed
from ...context import pass_context
from ..helpers import CLI_ERRORS, connect, fail


@click.command()
@click.argument("cite")
@pass_context
def check(ctx, cite):
    """Check whether CITE is exposed.

    Prints "exposed" or "not exposed"; both exit with status 0.
    """
    try:
        exposed = check_post_exposed(cite, transport=connect(ctx))
    except CLI_ERRORS as e:
        fail(e)

    click.echo("exposed" if exposed else "not exposed")

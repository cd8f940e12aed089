"""Show and hide commands - change the exposure of a post."""

import click

from ...addressing import expand_cite_path, exposed_post_url
from ...api import expose_post, hide_exposed_post
from ...context import pass_context
from ..helpers import CLI_ERRORS, connect, fail


@click.command()
@click.argument("cite")
@pass_context
def show(ctx, cite):
    """Expose CITE publicly and print its public URL.

    Examples:
        tlon-expose show diary/~zod/blog/170.141
    """
    try:
        expose_post(cite, transport=connect(ctx))
        click.echo(exposed_post_url(cite, ctx.ship_config().url))
    except CLI_ERRORS as e:
        fail(e)


@click.command()
@click.argument("cite")
@pass_context
def hide(ctx, cite):
    """Stop exposing CITE."""
    try:
        hide_exposed_post(cite, transport=connect(ctx))
        click.echo(f"Hidden: {expand_cite_path(cite)}")
    except CLI_ERRORS as e:
        fail(e)

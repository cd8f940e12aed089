"""Expand and url commands - offline cite path translation."""

import click

from ...addressing import expand_cite_path, exposed_post_url
from ...context import pass_context
from ..helpers import CLI_ERRORS, fail


@click.command()
@click.argument("cite")
def expand(cite):
    """Print the canonical form of a cite path.

    Examples:
        tlon-expose expand chat/~zod/general/170.141
        # /1/chan/chat/~zod/general/msg/170.141
    """
    try:
        click.echo(expand_cite_path(cite))
    except CLI_ERRORS as e:
        fail(e)


@click.command()
@click.argument("cite")
@click.option(
    "--base-url",
    help="Ship base URL (defaults to --url / $SHIP_URL)",
)
@pass_context
def url(ctx, cite, base_url):
    """Print the public URL a cite path is exposed at.

    Examples:
        tlon-expose url diary/~zod/blog/170.141 --base-url https://zod.tlon.network
    """
    try:
        base = base_url.rstrip("/") if base_url else ctx.ship_config().url
        click.echo(exposed_post_url(cite, base))
    except CLI_ERRORS as e:
        fail(e)

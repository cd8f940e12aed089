"""CLI helper utilities shared across commands."""

import sys

import click
import requests
from pydantic import ValidationError

from .. import client
from ..addressing import CitePathError
from ..context import ContextError, ExposeContext
from ..transport import Transport, UrbitHttpError

# Errors reported as "Error: ..." with exit status 1
CLI_ERRORS = (
    CitePathError,
    ContextError,
    UrbitHttpError,
    client.ClientNotConfiguredError,
    requests.RequestException,
    ValidationError,
)


def fail(err: Exception) -> None:
    """Print an error and exit.

    Raises:
        SystemExit: Always, with status 1
    """
    click.echo(f"Error: {err}", err=True)
    sys.exit(1)


def connect(ctx: ExposeContext) -> Transport:
    """Return the configured transport, configuring one from the context if needed."""
    if client.is_configured():
        return client.get_client()
    return client.configure_client(ctx.ship_config())

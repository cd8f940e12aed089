"""Expose API - manage public exposure of posts via the %expose agent.

The %expose agent publishes posts to the clearweb at URLs like:
    https://zod.tlon.network/expose/chan/diary/~zod/blog/note/170.141

Every operation accepts a simplified or canonical cite path and an optional
``transport``; without one the client from ``configure_client()`` is used.
Cite paths are expanded before any request, so malformed input raises
CitePathError without touching the network.
"""

from __future__ import annotations

import logging

from .addressing import expand_cite_path, format_cite
from .client import get_client
from .models import Action, EagerAction, HideAction, ShowAction, exposed_cites, is_exposed
from .transport import Transport, is_not_found

logger = logging.getLogger(__name__)

EXPOSE_APP = "expose"


def list_exposed_content(*, transport: Transport | None = None) -> list[str]:
    """List all currently exposed content.

    Returns:
        Cite paths of every exposed post; empty when the agent has nothing
        to show (including a not-found scry)
    """
    transport = transport or get_client()
    try:
        result = transport.scry(EXPOSE_APP, "/show")
    except Exception as err:
        if is_not_found(err):
            logger.debug("/show not found, treating as empty: %s", err)
            return []
        raise

    return [format_cite(cite) for cite in exposed_cites(result)]


def check_post_exposed(cite_path: str, *, transport: Transport | None = None) -> bool:
    """Check whether a post is currently exposed.

    A not-found scry means the post is not exposed.
    """
    full_path = expand_cite_path(cite_path)
    transport = transport or get_client()
    try:
        result = transport.scry(EXPOSE_APP, f"/show{full_path}")
    except Exception as err:
        if is_not_found(err):
            logger.debug("%s not found, not exposed", full_path)
            return False
        raise

    return is_exposed(result)


def expose_post(cite_path: str, *, transport: Transport | None = None) -> None:
    """Expose a post publicly on the clearweb.

    Example:
        expose_post("diary/~zod/blog/170.141.184.507")
    """
    full_path = expand_cite_path(cite_path)
    _poke(ShowAction(show=full_path), transport)


def hide_exposed_post(cite_path: str, *, transport: Transport | None = None) -> None:
    """Hide a previously exposed post."""
    full_path = expand_cite_path(cite_path)
    _poke(HideAction(hide=full_path), transport)


def set_expose_eager_mode(eager: bool, *, transport: Transport | None = None) -> None:
    """Set eager mode for the expose agent.

    In eager mode the agent pre-fetches pinned posts from other ships to
    prime its cache.
    """
    _poke(EagerAction(eager=eager), transport)


def _poke(action: Action, transport: Transport | None) -> None:
    transport = transport or get_client()
    transport.poke(EXPOSE_APP, action.mark, action.to_json())


__all__ = [
    "EXPOSE_APP",
    "check_post_exposed",
    "expose_post",
    "hide_exposed_post",
    "list_exposed_content",
    "set_expose_eager_mode",
]

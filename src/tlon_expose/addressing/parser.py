"""Cite path translation between simplified, canonical and URL forms.

Accepted input formats:
    chat/~host/channel/post-id                  # simplified
    /1/chan/chat/~host/channel/msg/post-id      # canonical

The content type label (msg, note, curio) is never part of simplified input;
it is derived from the channel kind.
"""

from .types import VERSION_PREFIX, ChannelKind, CitePath, CitePathError

_CANONICAL_PREFIX = f"{VERSION_PREFIX}/"


def parse_cite_path(raw: str) -> CitePath:
    """Parse a simplified cite path.

    Args:
        raw: Path like ``diary/~zod/blog/170.141.184``

    Returns:
        Parsed CitePath

    Raises:
        CitePathError: If fewer than four segments are given
        UnknownChannelKindError: If the kind is not chat, diary or heap

    Examples:
        >>> parse_cite_path("heap/~zod/links/1.2/3")
        CitePath(kind=<ChannelKind.HEAP: 'heap'>, host='~zod', channel='links', post_id='1.2/3')
    """
    parts = raw.split("/")
    if len(parts) < 4:
        raise CitePathError(
            "Invalid cite path. Expected format: chat/~host/channel/post-id "
            "or /1/chan/chat/~host/channel/msg/post-id"
        )

    kind, host, channel = parts[0], parts[1], parts[2]
    # Compound ids keep their separators
    post_id = "/".join(parts[3:])

    return CitePath(
        kind=ChannelKind.parse(kind),
        host=host,
        channel=channel,
        post_id=post_id,
    )


def expand_cite_path(raw: str) -> str:
    """Expand a simplified cite path to its canonical form.

    Canonical input (starting with ``/1/``) is returned verbatim without any
    validation, so an inconsistent kind/type pair passes through untouched.

    Examples:
        >>> expand_cite_path("chat/~host/channel/170.141")
        '/1/chan/chat/~host/channel/msg/170.141'

        >>> expand_cite_path("diary/~host/blog/170.141")
        '/1/chan/diary/~host/blog/note/170.141'

        >>> expand_cite_path("/1/chan/chat/~host/channel/msg/1")
        '/1/chan/chat/~host/channel/msg/1'
    """
    if raw.startswith(_CANONICAL_PREFIX):
        return raw
    return parse_cite_path(raw).canonical


def cite_path_to_url_path(cite_path: str) -> str:
    """Strip the version prefix from a canonical path for the public route.

    Only call this once per path: the result no longer starts with ``/1/`` and
    is returned as-is by a second call, but a path whose first real segment
    happens to be ``1`` would be stripped again.

    Examples:
        >>> cite_path_to_url_path("/1/chan/chat/~host/channel/msg/123")
        '/chan/chat/~host/channel/msg/123'
    """
    if cite_path.startswith(_CANONICAL_PREFIX):
        return cite_path[len(VERSION_PREFIX) :]
    return cite_path


def exposed_post_url(cite_path: str, ship_url: str) -> str:
    """Build the public URL of an exposed post.

    Args:
        cite_path: Simplified or canonical cite path
        ship_url: Ship base URL without trailing slash
            (e.g. ``https://zod.tlon.network``)

    Examples:
        >>> exposed_post_url("chat/~zod/general/170", "https://zod.tlon.network")
        'https://zod.tlon.network/expose/chan/chat/~zod/general/msg/170'
    """
    url_path = cite_path_to_url_path(expand_cite_path(cite_path))
    return f"{ship_url}/expose{url_path}"

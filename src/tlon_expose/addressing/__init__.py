"""Cite path addressing for exposed posts.

A post is addressed by channel kind, host ship, channel name and post id.
Three forms exist:

    chat/~zod/general/170.141                         # simplified
    /1/chan/chat/~zod/general/msg/170.141             # canonical
    https://zod.tlon.network/expose/chan/chat/~zod/general/msg/170.141

The content type segment (msg, note, curio) follows from the channel kind.
"""

from .cite import format_cite
from .parser import (
    cite_path_to_url_path,
    exposed_post_url,
    expand_cite_path,
    parse_cite_path,
)
from .types import (
    ChannelKind,
    CitePath,
    CitePathError,
    UnknownChannelKindError,
    content_type_for,
)

__all__ = [
    "ChannelKind",
    "CitePath",
    "CitePathError",
    "UnknownChannelKindError",
    "cite_path_to_url_path",
    "content_type_for",
    "expand_cite_path",
    "exposed_post_url",
    "format_cite",
    "parse_cite_path",
]

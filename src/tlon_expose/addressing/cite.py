"""Render cites returned by scries as canonical path strings."""

import json
from typing import Any

from pydantic import ValidationError

from ..models.cite import ChanReference, Cite, CiteLike
from .types import VERSION_PREFIX


def format_cite(cite: CiteLike) -> str:
    """Format a cite (string, dict or Cite model) as a readable path.

    Channel cites become canonical paths with a ``~`` prefixed host. Group
    and desk cites, and anything that does not validate as a channel cite,
    fall back to compact JSON. That fallback is for display only and is not
    a valid cite path.

    Examples:
        >>> format_cite("/1/chan/chat/~zod/general/msg/1")
        '/1/chan/chat/~zod/general/msg/1'

        >>> format_cite({"chan": {"nest": ["diary", ["zod", "blog"]], "wer": ["note", "170"]}})
        '/1/chan/diary/~zod/blog/note/170'

        >>> format_cite({"group": ["zod", "tlon"]})
        '{"group":["zod","tlon"]}'
    """
    if isinstance(cite, str):
        return cite

    if isinstance(cite, Cite):
        if cite.chan is not None:
            return _format_chan(cite.chan)
        return _to_json(cite.model_dump(exclude_none=True))

    if isinstance(cite, dict) and cite.get("chan") is not None:
        try:
            chan = ChanReference.model_validate(cite["chan"])
        except ValidationError:
            return _to_json(cite)
        return _format_chan(chan)

    return _to_json(cite)


def _format_chan(chan: ChanReference) -> str:
    wer = chan.wer if isinstance(chan.wer, str) else "/".join(map(str, chan.wer))
    return f"{VERSION_PREFIX}/chan/{chan.kind}/{_with_sig(chan.ship)}/{chan.name}/{wer}"


def _with_sig(ship: str) -> str:
    """Prefix a ship name with ``~`` unless it already has one."""
    return ship if ship.startswith("~") else f"~{ship}"


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), default=str)

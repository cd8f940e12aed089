"""Scry response shapes from the expose agent."""

from __future__ import annotations

from typing import Any, Dict, List, Union

from pydantic import TypeAdapter

from .cite import RawCite

# The agent serializes its set of cites either as a JSON array or as an
# object keyed by arbitrary ids.
ShowReply = Union[List[RawCite], Dict[str, RawCite]]

SHOW_REPLY = TypeAdapter(ShowReply)


def exposed_cites(result: Any) -> list[RawCite]:
    """Validate a ``/show`` scry reply and return its cites in reply order.

    Null and scalar replies hold no cites. A list or object whose entries
    are neither strings nor objects raises ``pydantic.ValidationError``.
    """
    if not isinstance(result, (list, dict)):
        return []

    reply = SHOW_REPLY.validate_python(result)
    if isinstance(reply, dict):
        return list(reply.values())
    return list(reply)


def is_exposed(result: Any) -> bool:
    """Interpret a ``/show/<path>`` scry payload."""
    return bool(result)


__all__ = ["SHOW_REPLY", "ShowReply", "exposed_cites", "is_exposed"]
